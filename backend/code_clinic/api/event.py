from flask import Blueprint, current_app, jsonify, request
from code_clinic.services.event import ActionDecodeError, decode_message
from code_clinic.services.event.broadcast import STATE_UPDATE


event = Blueprint('event', __name__)


@event.route('/state', methods=['GET'])
def get_event_state():
    coordinator = current_app.extensions['code_clinic']
    # Same envelope a freshly connected socket receives
    return jsonify({'type': STATE_UPDATE, 'payload': coordinator.store.snapshot()})


@event.route('/actions', methods=['POST'])
def submit_action():
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    try:
        action = decode_message(data)
    except ActionDecodeError as exc:
        current_app.logger.error(f"[error] rejected HTTP action: {exc}")
        return jsonify({'error': str(exc)}), 400

    coordinator = current_app.extensions['code_clinic']
    changed = coordinator.submit(action)
    return jsonify({'changed': changed})
