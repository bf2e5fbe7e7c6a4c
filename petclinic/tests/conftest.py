import pytest
from flask import template_rendered

from clinic_app import create_app
from clinic_models import db, Owner, Pet, PetType, Visit

TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'SEED_DEMO_DATA': False,
}


@pytest.fixture
def app():
    app = create_app(TEST_CONFIG)
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def captured_templates(app):
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)


@pytest.fixture
def make_owner(app):
    """Insert an owner directly and return its id."""
    def _make(**fields):
        data = dict(first_name='George', last_name='Franklin', address='110 W. Liberty St.',
                    city='Madison', telephone='6085551023')
        data.update(fields)
        with app.app_context():
            owner = Owner(**data)
            db.session.add(owner)
            db.session.commit()
            return owner.id
    return _make


@pytest.fixture
def make_pet(app):
    """Attach a pet (and optional visits) to an owner; returns the pet id."""
    def _make(owner_id, name='Leo', type_name='cat', birth_date=None, visits=()):
        with app.app_context():
            pet_type = PetType.query.filter_by(name=type_name).first() or PetType(name=type_name)
            pet = Pet(name=name, birth_date=birth_date, type=pet_type, owner_id=owner_id)
            db.session.add(pet)
            db.session.flush()
            for visit_date, description in visits:
                db.session.add(Visit(pet_id=pet.id, visit_date=visit_date, description=description))
            db.session.commit()
            return pet.id
    return _make


def owner_form(**overrides):
    data = {
        'firstName': 'Betty',
        'lastName': 'Davis',
        'address': '638 Cardinal Ave.',
        'city': 'Sun Prairie',
        'telephone': '6085551749',
    }
    data.update(overrides)
    return data
