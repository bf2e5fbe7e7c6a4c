try:
  import click
  from flask import Flask, render_template
  from werkzeug.exceptions import HTTPException
except Exception as e:
  missing = str(e)
  print("A required package is missing:", missing)
  print("Please run: python -m pip install -e .")
  raise

from clinic_config import Config
from clinic_models import db
from clinic_repositories import OwnerNotFound, SqlOwnerRepository, SqlVisitRepository
from owner_controller import OwnerController
from seed_db import seed_owners


def create_app(overrides=None):
  app = Flask(__name__)
  app.config.from_object(Config)
  if overrides:
    app.config.update(overrides)
  app.logger.setLevel(app.config['LOG_LEVEL'])

  db.init_app(app)

  owners = SqlOwnerRepository()
  visits = SqlVisitRepository()
  OwnerController(owners, visits).register(app)
  register_pages(app)
  register_error_handlers(app)
  register_commands(app, owners)

  with app.app_context():
    db.create_all()
    # Application is ready: populate demo owners unless there is data already
    if app.config['SEED_DEMO_DATA'] and owners.count() == 0:
      seed_owners(owners, count=app.config['SEED_OWNER_COUNT'])
      app.logger.info('Seeded %d demo owners', app.config['SEED_OWNER_COUNT'])
  return app


# -------------------- Routes --------------------
def register_pages(app):
  @app.route('/')
  def welcome():
    return render_template('welcome.html', title='Welcome', partial=False)


# -------------------- Errors --------------------
def register_error_handlers(app):
  @app.errorhandler(OwnerNotFound)
  def owner_not_found(e):
    app.logger.info('%s', e)
    return render_template('error.html', code=404, message=str(e), partial=False), 404

  @app.errorhandler(HTTPException)
  def http_error(e):
    return render_template('error.html', code=e.code, message=e.description, partial=False), e.code

  @app.errorhandler(Exception)
  def server_error(e):
    app.logger.exception('Unhandled error: %s', e)
    return render_template('error.html', code=500, message='Something happened...', partial=False), 500


# -------------------- CLI --------------------
def register_commands(app, owners):
  @app.cli.command('seed-owners')
  @click.option('--count', default=150, show_default=True, help='Number of demo owners to add.')
  def seed_owners_command(count):
    """Add randomly generated demo owners."""
    seed_owners(owners, count=count)
    click.echo(f'Seeded {count} owners')
