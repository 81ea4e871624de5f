import logging

from flask import Flask, jsonify, render_template

from weather_app.config import DEBUG, HOST, LOG_FORMAT, LOG_LEVEL, PORT
from weather_app.errors import InvalidZipCodeError, WeatherAppError
from weather_app.services import WeatherReportService
from weather_app.services.report import ZIP_CODE_RE

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

app = Flask(__name__)

# Stateless, so one instance serves every request
report_service = WeatherReportService()


@app.errorhandler(WeatherAppError)
def handle_weather_error(exc: WeatherAppError):
    # upstream detail goes to the log only; the client gets the generic message
    if exc.status >= 500:
        app.logger.error("%s: %s", type(exc).__name__, exc)
    else:
        app.logger.info("%s: %s", type(exc).__name__, exc)
    return jsonify({"error": exc.public_message}), exc.status


@app.route("/api")
def api_root():
    return jsonify({"message": "this message comes from GET at /api"})


@app.route("/api/weather/", defaults={"zipcode": ""})
@app.route("/api/weather/<path:zipcode>")
def weather(zipcode: str):
    # reject malformed input before any upstream call
    if not ZIP_CODE_RE.fullmatch(zipcode):
        raise InvalidZipCodeError(f"Invalid zip code: {zipcode!r}")

    app.logger.info("Building weather report for %s...", zipcode)
    report = report_service.get_report(zipcode)
    return jsonify(report.to_dict())


@app.route("/api/<path:path>")
def api_not_found(path: str):
    return jsonify({"error": f"Unknown API route: /api/{path}"}), 404


@app.route("/", defaults={"path": ""})
@app.route("/<path:path>")
def index(path: str):
    # Any non-API path gets the page; the page talks to the JSON API
    return render_template("index.html", default_zip="78130")


if __name__ == "__main__":
    # For development only – use a proper WSGI server in production
    app.run(debug=DEBUG, host=HOST, port=PORT)
