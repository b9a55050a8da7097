"""
E‑mail address normalisation shared by the lookups.

Addresses stored through the ``EmailStr`` schemas have their domain
lowercased by ``email-validator``.  Lookups run the caller's string
through the same validator so that the address a user registered with
finds the stored record.
"""

from pydantic import EmailStr, TypeAdapter, ValidationError

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(value: str) -> str:
    """Return ``value`` in the form ``EmailStr`` stores it.

    Strings that are not valid addresses are returned unchanged; they
    can never match a stored record.
    """
    try:
        return _email_adapter.validate_python(value)
    except ValidationError:
        return value
