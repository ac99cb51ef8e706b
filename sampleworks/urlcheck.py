"""Concurrent checks of web sites, optionally saving each page body to disk."""

import argparse
import itertools
import shutil
import sys
import time
import urllib.error
import urllib.request
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path

Fetch = Callable[[str], tuple[int, bytes]]

DEFAULT_URLS = (
    "http://example.com",
    "http://www.example.org",
    "http://example.net",
)


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one URL."""

    url: str
    status: int | None = None
    error: str | None = None
    saved_to: Path | None = None
    message: str = ""

    @property
    def up(self) -> bool:
        """True when the server answered at all."""
        return self.error is None


def _http_fetch(url: str, timeout: float = 10.0) -> tuple[int, bytes]:
    """Fetch ``url`` and return its status code and body.

    Error statuses are returned, not raised; only network failures raise.
    """
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            return response.status, response.read()
    except urllib.error.HTTPError as exc:
        try:
            return exc.code, exc.read()
        finally:
            exc.close()


def output_file_for(url: str, output_dir) -> Path:
    """Return the file a page body is saved to: the part after ``//`` plus ``.txt``."""
    parts = url.split("//")
    if len(parts) < 2:
        raise ValueError(f"URL has no '//' separator: {url!r}")
    return Path(output_dir) / f"{parts[1]}.txt"


def prepare_output_dir(path) -> Path:
    """Remove ``path`` with everything in it, then create it again empty."""
    directory = Path(path)
    if directory.exists():
        shutil.rmtree(directory)
    directory.mkdir(parents=True)
    return directory


def _down(url: str, exc: Exception) -> CheckResult:
    return CheckResult(
        url=url,
        error=str(exc),
        message=f"Error: {exc}, Server at URL: {url} is down\n",
    )


def check_url(url: str, fetch: Fetch | None = None) -> CheckResult:
    """Report whether the server behind ``url`` answers."""
    fetch = fetch or _http_fetch
    try:
        status, _ = fetch(url)
    except OSError as exc:
        return _down(url, exc)
    message = f"URL {url} Status code: {status} \n{url} is UP\n"
    return CheckResult(url=url, status=status, message=message)


def check_and_save(url: str, output_dir, fetch: Fetch | None = None) -> CheckResult:
    """Check ``url`` and, on status 200, write the body into ``output_dir``."""
    fetch = fetch or _http_fetch
    try:
        status, body = fetch(url)
    except OSError as exc:
        return _down(url, exc)

    message = f"URL {url} Status code: {status} \n"
    if status != 200:
        message += f"Server error: {status} at URL: {url} is down\n"
        return CheckResult(url=url, status=status, message=message)

    target = output_file_for(url, output_dir)
    message += f"Writing response body to {target} \n"
    target.write_bytes(body)
    return CheckResult(url=url, status=status, saved_to=target, message=message)


def check_all(urls: Iterable[str], output_dir, fetch: Fetch | None = None) -> list[CheckResult]:
    """Check and save every URL concurrently; results come in the order given."""
    urls = list(urls)
    if not urls:
        return []
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        return list(pool.map(lambda u: check_and_save(u, output_dir, fetch), urls))


def watch(
    urls: Iterable[str],
    interval: float = 2.0,
    fetch: Fetch | None = None,
    rounds: int | None = None,
) -> Iterator[CheckResult]:
    """Check every URL again and again, pausing ``interval`` seconds between rounds.

    Results of a round are yielded as they arrive. With ``rounds`` left as
    None the checks never stop.
    """
    urls = list(urls)
    counter = itertools.count() if rounds is None else range(rounds)
    with ThreadPoolExecutor(max_workers=max(1, len(urls))) as pool:
        for n in counter:
            if n:
                time.sleep(interval)
            futures = [pool.submit(check_url, url, fetch) for url in urls]
            for future in as_completed(futures):
                yield future.result()


def factorial(n: int) -> int:
    """Return the product of 2..n; 1 for anything below 2."""
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def main(argv=None) -> int:
    """Check web sites once and save their pages, or keep watching them."""
    parser = argparse.ArgumentParser(description="Check whether web sites are up.")
    parser.add_argument("urls", nargs="*", default=list(DEFAULT_URLS))
    parser.add_argument("--output-dir", default="output")
    parser.add_argument("--watch", action="store_true", help="keep checking until interrupted")
    parser.add_argument("--interval", type=float, default=2.0)
    args = parser.parse_args(argv)

    if args.watch:
        print("Press CTRL-C to stop the process")
        try:
            for result in watch(args.urls, args.interval):
                print(result.message, end="")
                print("#" * 20)
        except KeyboardInterrupt:
            pass
        return 0

    try:
        prepare_output_dir(args.output_dir)
    except OSError as exc:
        print(f"Error preparing {args.output_dir}: {exc}", file=sys.stderr)
        return 1

    for result in check_all(args.urls, args.output_dir):
        print(result.message)
    return 0