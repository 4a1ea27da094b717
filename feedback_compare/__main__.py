import logging

from dotenv import load_dotenv

from feedback_compare.app_factory import create_app
from feedback_compare.config.ini_config import IniConfig

if __name__ == "__main__":
    # API_KEY / GEMINI_API_KEY may live in a local .env file
    load_dotenv()

    settings = IniConfig.from_env_or_default().load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings)
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
