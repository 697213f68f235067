#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app sipcalc.wsgi run --port 5000 --debug

from sipcalc.app import create_app
from sipcalc.config import Settings

settings = Settings.from_env()
app = create_app(settings)


if __name__ == "__main__":
    app.run(port=settings.port, debug=settings.debug)
