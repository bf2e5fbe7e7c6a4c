"""Check a running dev server answers the owner pages. Not collected by pytest.

Start the app first (`python app.py`), then run: python smoke_test.py
"""
import requests


def check(url, headers=None):
    try:
        r = requests.get(url, timeout=5, headers=headers, allow_redirects=False)
        return (url, r.status_code)
    except Exception as e:
        return (url, str(e))


if __name__ == '__main__':
    base = 'http://127.0.0.1:5000'
    paths = ['/', '/owners/find', '/owners/new', '/owners?lastName=Smith', '/owners/1', '/owners/1/edit']
    for p in paths:
        print(check(base + p))
    print(check(base + '/owners/find', headers={'HX-Request': 'true'}))
