from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ALLOWED_ORIGINS', [])
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One event per app: store, dispatcher and connected clients live together
    from code_clinic.services.event import (
        ActionDispatcher,
        BroadcastCoordinator,
        ConnectionRegistry,
        StateStore,
    )
    from code_clinic.socketio_events import register_socketio_handlers, send_to_client

    store = StateStore()
    flask_app.extensions['code_clinic'] = BroadcastCoordinator(
        store=store,
        dispatcher=ActionDispatcher(store, logger=flask_app.logger),
        registry=ConnectionRegistry(),
        send=send_to_client,
        logger=flask_app.logger,
    )

    # Import and register blueprints here
    from code_clinic.routes import main
    flask_app.register_blueprint(main)

    from code_clinic.api.event import event
    flask_app.register_blueprint(event, url_prefix='/api/event')

    register_socketio_handlers()

    return flask_app
