from __future__ import annotations

import os

from src.comedor_system.comedor_system.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        debug=bool(app.config.get("DEBUG")),
        threaded=True,
    )
