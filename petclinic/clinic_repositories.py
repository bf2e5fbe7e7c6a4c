"""Persistence access for owners and visits.

The owner controller only relies on the method names below, so anything with
``find_by_id``/``find_by_last_name``/``save`` (owners) or ``find_by_pet_id``
(visits) can be passed in its place.
"""
from clinic_models import db, MAX_ID, Owner, Visit


class OwnerNotFound(LookupError):
    def __init__(self, owner_id):
        super().__init__(f'Owner {owner_id} not found')
        self.owner_id = owner_id


class SqlOwnerRepository:

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        # resolved lazily: the scoped session only exists inside an app context
        return self._session if self._session is not None else db.session

    def find_by_id(self, owner_id):
        if not 0 < owner_id <= MAX_ID:
            return None
        return self.session.get(Owner, owner_id)

    def find_by_last_name(self, last_name):
        """Owners whose last name starts with ``last_name``; blank matches everyone."""
        query = self.session.query(Owner)
        if last_name:
            query = query.filter(Owner.last_name.startswith(last_name, autoescape=True))
        return query.order_by(Owner.id).all()

    def count(self):
        return self.session.query(Owner).count()

    def save(self, owner):
        """Insert a new owner or copy an edited one onto its stored row.

        Updating never touches ``pets``: the bound owner carries only the form fields.
        """
        if owner.id is None:
            self.session.add(owner)
        else:
            stored = self.session.get(Owner, owner.id)
            if stored is None:
                raise OwnerNotFound(owner.id)
            if stored is not owner:
                for attr in Owner.FORM_FIELDS.values():
                    setattr(stored, attr, getattr(owner, attr))
        self.session.commit()
        return owner


class SqlVisitRepository:

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def find_by_pet_id(self, pet_id):
        return (self.session.query(Visit)
                .filter_by(pet_id=pet_id)
                .order_by(Visit.visit_date.asc(), Visit.id.asc())
                .all())
