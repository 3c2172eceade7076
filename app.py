from fatality_explorer import config
from fatality_explorer.server import build_app, configure_logging

# =========================================================
# 1. LOAD DATA & BUILD APP
# =========================================================
configure_logging()
app = build_app(config.DATA_DIR)
server = app.server

# =========================================================
# 2. RUN APP
# =========================================================
if __name__ == "__main__":
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
