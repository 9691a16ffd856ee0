"""FastAPI application hosting the plugin API."""

import sys

from fastapi import FastAPI

from src.adapters.web.plugin_routes import plugin_router
from src.config import CONFIG, __version__

app = FastAPI(title="NPS Survey Plugin", version=__version__)
app.include_router(plugin_router)


def _log(msg: str):
    print(msg, file=sys.stderr)


@app.on_event("startup")
async def startup_event():
    _log(f"NPS plugin API starting (plugin_id={CONFIG['plugin_id']})")


def main():
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=CONFIG["port"])


if __name__ == "__main__":
    main()
