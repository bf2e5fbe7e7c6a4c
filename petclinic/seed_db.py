"""Seed demo data for testing and visual QA.

``seed_owners`` is what the app runs at startup. Running this file directly
also adds pet types and a few pets with visits so the owner pages have
something to show; that part is idempotent, it checks for existing names
before inserting so you can re-run it without duplicating entries.
"""
import random
from datetime import date, timedelta

from clinic_models import db, Owner, Pet, PetType, Visit

LAST_NAMES = ('Smith', 'Wilson', 'Jones', 'Washington')
PET_TYPES = ('cat', 'dog', 'lizard', 'snake', 'bird', 'hamster')


def seed_owners(owners, count=150, rng=None):
    """Save ``count`` generated owners through the ``owners`` repository."""
    rng = rng or random.Random()
    created = []
    for i in range(count):
        owner = Owner(
            address=f'Main Street #{rng.randrange(1000)}',
            city=f'Town {rng.randrange(200)}',
            telephone='5555555555',
            first_name=f'Guy{i}',
            last_name=LAST_NAMES[rng.randrange(len(LAST_NAMES))],
        )
        created.append(owners.save(owner))
    return created


def ensure_pet_type(name):
    t = PetType.query.filter_by(name=name).first()
    if t:
        return t
    t = PetType(name=name)
    db.session.add(t)
    return t


def add_pet_if_missing(owner, name, type_name, birth_date, visits=()):
    if any(p.name == name for p in owner.pets):
        return None
    pet = Pet(name=name, birth_date=birth_date, type=ensure_pet_type(type_name))
    owner.pets.append(pet)
    db.session.flush()
    for days_ago, description in visits:
        db.session.add(Visit(pet_id=pet.id, visit_date=date.today() - timedelta(days=days_ago),
                             description=description))
    return pet


def seed():
    from clinic_app import create_app

    app = create_app()
    with app.app_context():
        for name in PET_TYPES:
            ensure_pet_type(name)
        db.session.commit()

        demo_pets = [
            ('Leo', 'cat', date(2010, 9, 7), [(30, 'rabies shot'), (2, 'neutered')]),
            ('Basil', 'hamster', date(2012, 8, 6), []),
            ('Rosy', 'dog', date(2011, 4, 17), [(12, 'spayed')]),
            ('Jewel', 'dog', date(2010, 3, 7), []),
            ('Iggy', 'lizard', date(2010, 11, 30), [(5, 'checkup')]),
        ]
        owners = Owner.query.order_by(Owner.id).limit(len(demo_pets)).all()
        added = 0
        for owner, (name, type_name, born, visits) in zip(owners, demo_pets):
            if add_pet_if_missing(owner, name, type_name, born, visits):
                added += 1
        db.session.commit()
        print(f'Added {added} demo pets')
        print('Seeded demo data (idempotent)')


if __name__ == '__main__':
    seed()
