import logging
from flask import Flask, jsonify, request

from .models import InvalidNotificationError, event_from_dict
from .service import ClearAllRequested

log = logging.getLogger(__name__)

def create_app(config, service):
    app = Flask(__name__)

    @app.route('/healthz')
    def healthz():
        return jsonify({"status": "ok", "language": config.language})

    @app.route('/notifications', methods=['GET'])
    def notifications():
        unread = service.unread_notifications
        payload = service.render().to_dict()
        payload["unread"] = unread
        return jsonify(payload)

    @app.route('/notifications', methods=['POST'])
    def add_notification():
        data = request.get_json(silent=True)
        try:
            event = event_from_dict(data)
        except InvalidNotificationError as e:
            log.warning("Rejected notification payload: %s", e)
            return jsonify({"error": str(e)}), 400

        service.notify(event)
        return jsonify({"status": "logged", "unread": service.unread_notifications}), 201

    @app.route('/notifications/clear', methods=['POST'])
    def clear_all():
        log.info("Clear all requested via Web UI")
        service.handle(ClearAllRequested())
        return jsonify({"status": "cleared"})

    @app.route('/notifications/tick', methods=['POST'])
    def tick():
        return jsonify({"dots": service.tick()})

    return app
