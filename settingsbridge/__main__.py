import click
import uvicorn
from dotenv import load_dotenv

load_dotenv()


@click.command()
@click.option("--host", "host", default=None, help="Bind address (default: API_HOST)")
@click.option("--port", "port", default=None, type=int, help="Bind port (default: API_PORT)")
@click.option("--reload", "reload", is_flag=True, default=False, help="Reload on code changes")
def main(host, port, reload):
    """Run the Settings Bridge API server."""
    # Imported late so values from .env reach the config module
    from settingsbridge.logging_config import get_logging_config
    from settingsbridge.modules.config import get_config

    config = get_config()
    log_level = config.get("log_level")

    uvicorn.run(
        "settingsbridge.main:app",
        host=host or config.get("host"),
        port=port or config.get("port"),
        log_level=log_level.lower(),
        reload=reload or config.get("debug"),
        log_config=get_logging_config(log_level),
    )


if __name__ == "__main__":
    main()
