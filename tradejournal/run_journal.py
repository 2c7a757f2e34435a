"""Run the Streamlit trade journal."""
import logging
import os
import subprocess
import sys


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    here = os.path.dirname(__file__)
    app_path = os.path.join(here, "app.py")
    logging.getLogger(__name__).info("Starting journal app from %s", app_path)
    return subprocess.call([sys.executable, "-m", "streamlit", "run", app_path])


if __name__ == "__main__":
    raise SystemExit(main())
