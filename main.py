import logging

import uvicorn
from rich import print
from rich.logging import RichHandler

from app import config
from app.app import create_app


CONFIG = config.Config()


def main() -> None:
    logging.basicConfig(
        level=CONFIG.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    app = create_app(CONFIG)
    print(
        f"[bold green]City infos[/] listening on {CONFIG.host}:{CONFIG.port} "
        f"({CONFIG.env.value}, upstream {CONFIG.api_base_url})"
    )
    uvicorn.run(app, host=CONFIG.host, port=CONFIG.port, log_config=None)


if __name__ == "__main__":
    main()
