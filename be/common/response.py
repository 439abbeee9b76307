from flask import jsonify


def success(data=None, status=200):
    return jsonify(data if data is not None else {}), status


def fail(message="error", status=400):
    return jsonify({"message": message}), status
