"""
Entry point for running the application with `python -m backend`.

Serves on BIND_IP:PORT, or on the Unix socket at SOCKET_PATH when
LISTEN_TYPE is "sock".
"""
import uvicorn

from backend.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    if settings.listen_type == "sock":
        uvicorn.run("backend.main:app", uds=settings.socket_path)
    else:
        uvicorn.run("backend.main:app", host=settings.bind_ip, port=settings.port)
