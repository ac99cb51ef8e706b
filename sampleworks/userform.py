"""Turning submitted form fields into a user profile."""

import re
from collections.abc import Mapping
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class FormUser:
    """Profile data for a user."""

    first_name: str
    last_name: str
    email: str
    city: str
    age: int
    id: str = ""

    def to_json(self) -> dict:
        """Return the JSON form of the profile."""
        return {
            "id": self.id,
            "firstname": self.first_name,
            "lastname": self.last_name,
            "email": self.email,
            "age": self.age,
            "city": self.city,
        }


class FormError(ValueError):
    """Raised when submitted form data cannot make a user; holds every problem found."""

    def __init__(self, errors) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))

    def to_json(self) -> dict:
        """Return the JSON error payload."""
        return {"errors": list(self.errors)}


def process_form_field(form: Mapping[str, str], field: str) -> str:
    """Return the non-empty value of ``field`` or raise FormError."""
    value = form.get(field) or ""
    if not value:
        raise FormError([f"Missing '{field}' parameter, cannot continue"])
    return value


def form_to_user(form: Mapping[str, str]) -> FormUser:
    """Build a FormUser from form fields, reporting all missing or bad fields at once."""
    errors: list[str] = []
    values: dict[str, str] = {}
    for field in ("firstname", "lastname", "email", "city", "age"):
        try:
            values[field] = process_form_field(form, field)
        except FormError as exc:
            errors.extend(exc.errors)

    age = 0
    if "age" in values:
        if _INTEGER.fullmatch(values["age"]):
            age = int(values["age"])
        else:
            errors.append("Parameter 'age' not an integer")

    if errors:
        raise FormError(errors)
    return FormUser(
        first_name=values["firstname"],
        last_name=values["lastname"],
        email=values["email"],
        city=values["city"],
        age=age,
    )


def heartbeat() -> dict:
    """Return the liveness payload."""
    return {"status": "OK", "code": 200}