from typing import Optional

from flask import Flask

from .config import Config, load_config
from .page import render_index


def create_app(config: Optional[Config] = None) -> Flask:
    config = config or load_config()
    app = Flask(__name__)
    app.config["RASPIPASS"] = config

    @app.get("/")
    def index():
        # Fresh engine per request; the version file is re-read every time.
        return render_index(config.paths)

    return app


def main(config: Optional[Config] = None) -> None:
    config = config or load_config()
    app = create_app(config)
    app.run(host=config.server.host, port=config.server.port, debug=False)


if __name__ == "__main__":
    main()
