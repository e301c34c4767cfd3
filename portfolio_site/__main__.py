import os

from .app import create_app

# Dev server. Start with: python -m portfolio_site
if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    print(f"Serving portfolio on http://{host}:{port}")
    create_app().run(host=host, port=port, debug=True)
