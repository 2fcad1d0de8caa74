"""
Customers API entrypoint: SQLite-backed customer storage behind FastAPI.
Deployment-ready: CORS, configurable host/port and database via env.
Run with `python main.py` or `uvicorn main:app` from backend/.
"""
import uvicorn

from customers_api.application import create_app
from customers_api.core.config import get_settings

settings = get_settings()

app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
