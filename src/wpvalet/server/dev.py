"""Development server.

Starts a pounce ASGI server with a live ValetApp object.
"""

from wpvalet.server.app import ValetApp


def run_server(app: ValetApp, host: str, port: int) -> None:
    """Start a single-worker pounce server for ``app``.

    Pounce's ``run()`` takes an import string, but the CLI builds a live
    ``ValetApp`` from its arguments, so ``pounce.Server`` is used directly
    with the ASGI callable.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        log_level=app.config.log_level,
    )
    server = Server(config, app)
    server.run()
