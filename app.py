"""Development server for the pet clinic owner pages.

Run `python app.py` from the repository root; the owner app modules live in
petclinic/ and are not a package, so that folder goes on sys.path first.
"""
import sys
from os import path

MODULES_DIR = path.join(path.dirname(path.abspath(__file__)), 'petclinic')
if MODULES_DIR not in sys.path:
    sys.path.insert(0, MODULES_DIR)

from clinic_app import create_app  # noqa: E402

app = create_app()

if __name__ == '__main__':
    app.run(debug=True)
