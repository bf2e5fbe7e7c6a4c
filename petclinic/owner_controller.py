"""Owner pages: create, find, edit and show clinic owners.

Repositories are handed to ``OwnerController`` explicitly and the URL rules
live in ``OwnerController.ROUTES``; ``register`` wires them onto a Flask app.
Every page can be served whole or as an htmx fragment, decided per request by
``is_partial_request`` and passed down to ``render_view``.
"""
from flask import abort, current_app, make_response, redirect, render_template, request

from clinic_models import MAX_ID, Owner
from owner_forms import Errors, Invalid, bind_owner

VIEWS_OWNER_CREATE_OR_UPDATE_FORM = 'owners/createOrUpdateOwnerForm.html'
VIEWS_FIND_OWNERS = 'owners/findOwners.html'
VIEWS_OWNERS_LIST = 'owners/ownersList.html'
VIEWS_OWNER_DETAILS = 'owners/ownerDetails.html'


# -------------------- Rendering helpers --------------------
def is_partial_request(req):
    """True when htmx issued the request (it always sends ``HX-Request: true``)."""
    return req.headers.get('HX-Request', '').lower() == 'true'


def render_view(view, model, partial=False):
    # templates pick the fragment or full layout from `partial`
    return render_template(view, partial=partial, **model)


def redirect_to(location, partial=False):
    if partial:
        # htmx follows HX-Redirect with a full browser navigation
        resp = make_response('', 200)
        resp.headers['HX-Redirect'] = location
        return resp
    return redirect(location)


def owner_url(owner_id):
    return f'/owners/{owner_id}'


# -------------------- Controller --------------------
class OwnerController:

    ROUTES = (
        ('GET', '/owners/new', 'init_creation_form'),
        ('POST', '/owners/new', 'process_creation_form'),
        ('GET', '/owners/find', 'init_find_form'),
        ('GET', '/owners', 'process_find_form'),
        ('GET', '/owners/<int:owner_id>/edit', 'init_update_owner_form'),
        ('POST', '/owners/<int:owner_id>/edit', 'process_update_owner_form'),
        ('GET', '/owners/<int:owner_id>', 'show_owner'),
    )

    def __init__(self, owners, visits):
        self.owners = owners
        self.visits = visits

    def register(self, app):
        for method, rule, name in self.ROUTES:
            app.add_url_rule(rule, endpoint=name, view_func=getattr(self, name), methods=[method])

    def _load_owner(self, owner_id):
        owner = self.owners.find_by_id(owner_id) if owner_id <= MAX_ID else None
        if owner is None:
            current_app.logger.info('Owner %s not found', owner_id)
            abort(404, description=f'Owner {owner_id} not found')
        return owner

    def init_creation_form(self):
        model = {'owner': Owner(), 'errors': Errors(), 'is_new': True}
        return render_view(VIEWS_OWNER_CREATE_OR_UPDATE_FORM, model, is_partial_request(request))

    def process_creation_form(self):
        result = bind_owner(request.form)
        if isinstance(result, Invalid):
            current_app.logger.debug('Rejected new owner: %s', result.errors.items)
            model = {'owner': result.owner, 'errors': result.errors, 'is_new': True}
            return render_view(VIEWS_OWNER_CREATE_OR_UPDATE_FORM, model, is_partial_request(request))
        owner = self.owners.save(result.owner)
        current_app.logger.info('Created owner %s', owner.id)
        return redirect(owner_url(owner.id))

    def init_find_form(self):
        model = {'owner': Owner(), 'errors': Errors()}
        return render_view(VIEWS_FIND_OWNERS, model, is_partial_request(request))

    def process_find_form(self):
        partial = is_partial_request(request)
        last_name = (request.args.get('lastName') or '').strip()
        owner = Owner(last_name=last_name)
        errors = Errors()
        results = self.owners.find_by_last_name(last_name)
        if not results:
            # no owners found
            errors.reject_value('lastName', 'notFound', 'not found')
            return render_view(VIEWS_FIND_OWNERS, {'owner': owner, 'errors': errors}, partial)
        if len(results) == 1:
            # 1 owner found, skip the listing
            return redirect_to(owner_url(results[0].id), partial)
        # multiple owners found
        current_app.logger.debug('%d owners match %r', len(results), last_name)
        return render_view(VIEWS_OWNERS_LIST, {'owner': owner, 'selections': results}, partial)

    def init_update_owner_form(self, owner_id):
        owner = self._load_owner(owner_id)
        model = {'owner': owner, 'errors': Errors(), 'is_new': False}
        return render_view(VIEWS_OWNER_CREATE_OR_UPDATE_FORM, model, is_partial_request(request))

    def process_update_owner_form(self, owner_id):
        self._load_owner(owner_id)
        result = bind_owner(request.form)
        if isinstance(result, Invalid):
            model = {'owner': result.owner, 'errors': result.errors, 'is_new': False}
            return render_view(VIEWS_OWNER_CREATE_OR_UPDATE_FORM, model, is_partial_request(request))
        owner = result.owner
        # the path decides which owner is updated, never the form body
        owner.id = owner_id
        self.owners.save(owner)
        current_app.logger.info('Updated owner %s', owner_id)
        return redirect(owner_url(owner_id))

    def show_owner(self, owner_id):
        owner = self._load_owner(owner_id)
        for pet in owner.pets:
            pet.visits = self.visits.find_by_pet_id(pet.id)
        return render_view(VIEWS_OWNER_DETAILS, {'owner': owner}, is_partial_request(request))
