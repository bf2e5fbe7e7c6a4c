import pytest

from clinic_models import Owner
from conftest import owner_form
from owner_forms import Errors, Invalid, Ok, bind_owner


def test_bind_copies_allowed_fields_and_strips():
    result = bind_owner(owner_form(firstName='  Betty ', city=' Sun Prairie'))
    assert isinstance(result, Ok)
    assert result.owner.first_name == 'Betty'
    assert result.owner.city == 'Sun Prairie'
    assert not result.errors.has_errors()


def test_bind_never_sets_id():
    result = bind_owner(owner_form(id='7'))
    assert isinstance(result, Ok)
    assert result.owner.id is None


def test_bind_onto_existing_owner_keeps_its_id():
    owner = Owner(id=3, first_name='Old')
    result = bind_owner(owner_form(id='9'), owner)
    assert result.owner is owner
    assert owner.id == 3
    assert owner.first_name == 'Betty'


def test_missing_fields_are_all_reported():
    result = bind_owner({})
    assert isinstance(result, Invalid)
    assert {e.field for e in result.errors.items} == {
        'firstName', 'lastName', 'address', 'city', 'telephone'}
    assert all(e.code == 'required' for e in result.errors.items)


@pytest.mark.parametrize('telephone, ok', [
    ('6085551023', True),
    ('1', True),
    ('60855510231', False),
    ('608-555', False),
    ('phone', False),
])
def test_telephone_is_up_to_ten_digits(telephone, ok):
    result = bind_owner(owner_form(telephone=telephone))
    assert isinstance(result, Ok) is ok
    if not ok:
        assert result.errors.codes('telephone') == ['digits']


def test_errors_lookup_by_field():
    errors = Errors()
    assert not errors
    errors.reject_value('lastName', 'notFound', 'not found')
    assert 'lastName' in errors
    assert 'firstName' not in errors
    assert errors.for_field('lastName')[0].message == 'not found'
    assert len(errors) == 1
