from code_clinic import create_app, socketio

app = create_app()

if __name__ == '__main__':
    app.logger.info('--- Code-Clinic real-time server ---')
    app.logger.info(f"Server is running on port {app.config['PORT']}")
    socketio.run(app, host=app.config['HOST'], port=app.config['PORT'],
                 debug=app.config['DEBUG'],
                 allow_unsafe_werkzeug=app.config['ALLOW_UNSAFE_WERKZEUG'])
