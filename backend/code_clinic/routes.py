from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Code-Clinic event server!'})

@main.route('/health')
def health():
    coordinator = current_app.extensions['code_clinic']
    return jsonify({'status': 'ok', 'clients': len(coordinator.registry)})
