import os

import uvicorn

from storefront.main import create_app


def main() -> None:
    uvicorn.run(
        create_app(),
        host=os.getenv("STOREFRONT_HOST", "127.0.0.1"),
        port=int(os.getenv("STOREFRONT_PORT", "8000")),
    )


if __name__ == "__main__":
    main()
