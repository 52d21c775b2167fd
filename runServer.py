import uvicorn

from Info_app.config import get_settings

def run_info():
    settings = get_settings()
    uvicorn.run("Info_app.main:app",
                host=settings.http_host,
                port=settings.http_port,
                log_config=None)

if __name__ == "__main__":
    run_info()
