"""Main application entry point.

Runs FastAPI with NiceGUI mounted for the chat interface, or the two as
separate processes. Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

_WILDCARD_HOSTS = {"", "0.0.0.0", "::"}


def api_base_url(host: str, port: int) -> str:
    """Return the URL the chat page uses to reach the API.

    A wildcard bind address is reachable on loopback; a specific address
    is only reachable on itself.
    """
    if host in _WILDCARD_HOSTS:
        host = "localhost"
    elif ":" in host:
        host = f"[{host}]"
    return f"http://{host}:{port}"


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles the /chat and /health routes, NiceGUI serves the page.
    Both accessible on PORT (default 8000).
    """
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    # The page reaches /chat on this same server unless told otherwise
    os.environ.setdefault("API_BASE_URL", api_base_url(host, port))

    from nicegui import ui

    from gemini_chat.api.app import create_app
    from gemini_chat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Gemini Chat",
        favicon="💬",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "gemini-chat-secret"),
    )

    logger.info(f"Starting integrated server on {os.environ['API_BASE_URL']}")
    logger.info(f"API docs available at {os.environ['API_BASE_URL']}/docs")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def separate_commands() -> tuple[list[str], list[str], dict[str, str]]:
    """Build the API and UI subprocess commands plus the UI's environment.

    The API listens on HOST:PORT (default 8000), the UI on UI_PORT (default
    8080), and the UI is pointed at the API through API_BASE_URL.
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    api_cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "gemini_chat.api.app:app",
        "--host",
        host,
        "--port",
        str(port),
    ]
    ui_cmd = [sys.executable, "-c", "from gemini_chat.ui.chat_page import main; main()"]

    ui_env = dict(os.environ)
    ui_env.setdefault("API_BASE_URL", api_base_url(host, port))
    return api_cmd, ui_cmd, ui_env


def run_separate() -> None:
    """Run FastAPI and NiceGUI as separate servers.

    Stops both as soon as either one exits.
    """
    import asyncio
    import subprocess

    api_cmd, ui_cmd, ui_env = separate_commands()

    async def run_servers() -> None:
        logger.info(f"Starting FastAPI on {ui_env['API_BASE_URL']}")
        logger.info(f"Starting NiceGUI on port {os.getenv('UI_PORT', '8080')}")

        fastapi_proc = subprocess.Popen(api_cmd)
        nicegui_proc = subprocess.Popen(ui_cmd, env=ui_env)

        try:
            while True:
                await asyncio.sleep(1)
                if fastapi_proc.poll() is not None or nicegui_proc.poll() is not None:
                    break
        except KeyboardInterrupt:
            logger.info("Shutting down servers...")
        finally:
            fastapi_proc.terminate()
            nicegui_proc.terminate()
            fastapi_proc.wait()
            nicegui_proc.wait()

    asyncio.run(run_servers())


def main() -> None:
    """Application entry point.

    Set RUN_MODE=separate to run FastAPI and NiceGUI on different ports.
    Default is integrated mode (both on one port).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Gemini Chat in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
