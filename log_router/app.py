"""Flask application factory wiring backends, senders, strategy and endpoint."""

from flask import Flask, jsonify

from log_router.config import LoggerConfig, load_config
from log_router.memory_store import MemoryStore
from log_router.senders.console import ConsoleSender
from log_router.senders.mongodb import MongodbSender
from log_router.senders.syslog import SyslogSender
from log_router.senders.tee import TeeSender
from log_router.server_logger import ServerLogger
from log_router.strategies.leveled import LeveledStrategy
from log_router.syslog_client import SyslogClient


def create_app(config: LoggerConfig | None = None, store=None, syslog=None):
    """Build the app.

    Routing: debug records only reach the document store, notice/info also go
    to the console, and warnings or worse also go to syslog (with the default
    thresholds).
    """
    app = Flask(__name__)

    if config is None:
        config = load_config()
    if store is None:
        store = MemoryStore(max_size=config.store_max_documents)
    if syslog is None:
        syslog = SyslogClient(address=(config.syslog_host, config.syslog_port))

    documents = MongodbSender(config.accepted_levels, store, config.collection_name)
    console = ConsoleSender(depth=config.depth)
    syslog_sender = SyslogSender(
        [], config.syslog_ident, {}, config.syslog_facility, syslog, {"depth": config.depth}
    )
    strategy = LeveledStrategy(
        low=documents,
        medium=TeeSender([documents, console]),
        high=TeeSender([documents, syslog_sender]),
        min_low=config.min_low,
        max_high=config.max_high,
    )
    server_logger = ServerLogger(strategy, app, config)

    # Store components on app for access in tests
    app.config["components"] = {
        "config": config,
        "store": store,
        "syslog": syslog,
        "logger": server_logger,
    }

    @app.route("/health")
    def health():
        collection = store.get_collection(config.collection_name)
        return jsonify({
            "status": "healthy",
            "serve_path": config.serve_path,
            "senders": len(server_logger.senders),
            "total_logs": getattr(collection, "total_count", None),
        })

    return app
