#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e .[test]
#setup: python -m compound_interest   (or: flask --app compound_interest.app:create_app run --port 5000 --debug)

from compound_interest.app import create_app

if __name__ == "__main__":
    create_app().run(port=5000, debug=True)
