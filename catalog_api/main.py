# catalog_api/main.py
import uvicorn

from catalog_api.api import create_app
from catalog_api.utils.settings import HOST, PORT

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
