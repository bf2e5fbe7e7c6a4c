from datetime import date

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# largest value an INTEGER primary key column can hold
MAX_ID = 2 ** 63 - 1


# -------------------- Models --------------------
class Owner(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(30))
    last_name = db.Column(db.String(30), index=True)
    address = db.Column(db.String(255))
    city = db.Column(db.String(80))
    telephone = db.Column(db.String(20))
    pets = db.relationship('Pet', backref='owner', order_by='Pet.name',
                           cascade='all, delete-orphan')

    # form field name -> attribute; 'id' is deliberately absent so it can never be bound
    FORM_FIELDS = {
        'firstName': 'first_name',
        'lastName': 'last_name',
        'address': 'address',
        'city': 'city',
        'telephone': 'telephone',
    }

    def __repr__(self):
        return f'<Owner {self.id} {self.first_name} {self.last_name}>'


class PetType(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(80), unique=True)


class Pet(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(30))
    birth_date = db.Column(db.Date)
    type_id = db.Column(db.Integer, db.ForeignKey('pet_type.id'))
    type = db.relationship('PetType')
    owner_id = db.Column(db.Integer, db.ForeignKey('owner.id'))

    # not mapped: filled per request by the owner detail page
    visits = ()


class Visit(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    pet_id = db.Column(db.Integer, db.ForeignKey('pet.id'), index=True)
    visit_date = db.Column(db.Date, default=date.today)
    description = db.Column(db.String(255))
