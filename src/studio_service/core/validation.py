"""
Submission Validator

Turns a raw contact form payload (JSON body or decoded multipart fields)
into a ContactSubmissionCreate, or reports every rule it breaks.
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from email_validator import EmailNotValidError, validate_email

from studio_service.core.errors import FieldViolation, ValidationError
from studio_service.models.contact import ContactSubmissionCreate

PHONE_PATTERN = re.compile(r"^[0-9]+$")

# Wire name -> (attribute, message when missing)
REQUIRED_FIELDS = (
    ("brideName", "bride_name", "Ім'я нареченої обов'язкове"),
    ("groomName", "groom_name", "Ім'я нареченого обов'язкове"),
    ("phone", "phone", "Телефон обов'язковий"),
    ("email", "email", "Email обов'язковий"),
    ("weddingDate", "wedding_date", "Дата весілля обов'язкова"),
    ("location", "location", "Локація весілля обов'язкова"),
)


@dataclass
class ValidationResult:
    """Either a validated submission or the violations that prevented it"""

    value: Optional[ContactSubmissionCreate] = None
    violations: List[FieldViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def unwrap(self) -> ContactSubmissionCreate:
        """Return the value or raise ValidationError with all violations"""
        if not self.ok:
            raise ValidationError(self.violations)
        return self.value


def _required_string(payload: Mapping[str, Any], key: str, missing: str, violations: List[FieldViolation]) -> str:
    value = payload.get(key)
    if value is None:
        violations.append(FieldViolation(key, missing))
        return ""
    if not isinstance(value, str):
        violations.append(FieldViolation(key, "Має бути рядком"))
        return ""
    value = value.strip()
    if not value:
        violations.append(FieldViolation(key, missing))
    return value


def parse_services(raw: Any, violations: List[FieldViolation]) -> List[str]:
    """Services arrive as a list (JSON) or a JSON-encoded string (multipart)"""
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            violations.append(FieldViolation("services", "Невірний формат списку послуг"))
            return []

    if raw is None:
        raw = []
    if not isinstance(raw, list) or not all(isinstance(s, str) for s in raw):
        violations.append(FieldViolation("services", "Послуги мають бути списком рядків"))
        return []

    services = [s.strip() for s in raw]
    if any(not s for s in services):
        violations.append(FieldViolation("services", "Назва послуги не може бути порожньою"))
        return []
    if not services:
        violations.append(FieldViolation("services", "Оберіть послуги"))
    return services


def _attachments(raw: Any, violations: List[FieldViolation]) -> List[str]:
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(name, str) for name in raw):
        violations.append(FieldViolation("attachments", "Вкладення мають бути списком назв файлів"))
        return []
    return list(raw)


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _additional_info(raw: Any, violations: List[FieldViolation]) -> Optional[str]:
    if raw is None:
        return None
    if not isinstance(raw, str):
        violations.append(FieldViolation("additionalInfo", "Має бути рядком"))
        return None
    return raw.strip() or None


def validate_submission(payload: Mapping[str, Any]) -> ValidationResult:
    """Validate a contact form payload keyed by wire names"""
    if not isinstance(payload, Mapping):
        return ValidationResult(violations=[FieldViolation("body", "Очікується об'єкт з даними форми")])

    violations: List[FieldViolation] = []
    values = {}
    for key, attribute, missing in REQUIRED_FIELDS:
        values[attribute] = _required_string(payload, key, missing, violations)

    if values["phone"] and not PHONE_PATTERN.match(values["phone"]):
        violations.append(FieldViolation("phone", "Телефон повинен містити лише цифри"))
    if values["email"] and not is_valid_email(values["email"]):
        violations.append(FieldViolation("email", "Невірний формат email"))

    values["services"] = parse_services(payload.get("services"), violations)
    values["additional_info"] = _additional_info(payload.get("additionalInfo"), violations)
    values["attachments"] = _attachments(payload.get("attachments"), violations)

    if violations:
        return ValidationResult(violations=violations)
    return ValidationResult(value=ContactSubmissionCreate(**values))
