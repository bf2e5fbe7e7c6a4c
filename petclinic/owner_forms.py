"""Turn a submitted owner form into an Owner plus field errors.

``bind_owner`` is the only way request data reaches an Owner: it copies the
fields listed in ``Owner.FORM_FIELDS`` and nothing else, so an ``id`` posted
from the browser is dropped.
"""
import re
from dataclasses import dataclass, field

from clinic_models import Owner

REQUIRED_FIELDS = ('firstName', 'lastName', 'address', 'city', 'telephone')
TELEPHONE_RE = re.compile(r'^\d{1,10}$')


@dataclass
class FieldError:
    field: str
    code: str
    message: str


@dataclass
class Errors:
    items: list = field(default_factory=list)

    def reject_value(self, field_name, code, message):
        self.items.append(FieldError(field_name, code, message))

    def has_errors(self):
        return bool(self.items)

    def for_field(self, field_name):
        return [e for e in self.items if e.field == field_name]

    def codes(self, field_name):
        return [e.code for e in self.for_field(field_name)]

    def __contains__(self, field_name):
        return any(e.field == field_name for e in self.items)

    def __len__(self):
        return len(self.items)


@dataclass
class Ok:
    owner: Owner
    errors: Errors = field(default_factory=Errors)


@dataclass
class Invalid:
    owner: Owner
    errors: Errors


def bind_owner(form, owner=None):
    """Bind ``form`` onto ``owner`` (a fresh Owner by default) and validate it.

    Returns ``Ok(owner)`` or ``Invalid(owner, errors)``; the owner is returned
    either way so the form can be redisplayed with what the user typed.
    """
    if owner is None:
        owner = Owner()
    for form_name, attr in Owner.FORM_FIELDS.items():
        value = form.get(form_name)
        setattr(owner, attr, value.strip() if value is not None else None)
    errors = validate_owner(owner)
    if errors.has_errors():
        return Invalid(owner, errors)
    return Ok(owner)


def validate_owner(owner):
    errors = Errors()
    for form_name in REQUIRED_FIELDS:
        if not getattr(owner, Owner.FORM_FIELDS[form_name]):
            errors.reject_value(form_name, 'required', 'must not be empty')
    telephone = owner.telephone
    if telephone and not TELEPHONE_RE.match(telephone):
        errors.reject_value('telephone', 'digits',
                            'numeric value out of bounds (<10 digits> expected)')
    return errors
