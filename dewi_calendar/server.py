#!/usr/bin/env python3
"""
HTTP server publishing Dewi-online reservations for calendar subscription.

Endpoints:
    GET /json   upcoming reservations as JSON
    GET /ical   upcoming reservations as an iCalendar feed

Usage:
    dewi-calendar [--host HOST] [--port PORT] [--debug]

Settings come from the environment (or a .env file), see config.py.
"""

import argparse
import logging
import sys
from dataclasses import replace

from dotenv import find_dotenv, load_dotenv
from flask import Flask, Response, jsonify

from . import config as config_module
from .errors import ConfigError, DewiError
from .generator import CalendarGenerator, to_json
from .reservations import compute_reservations

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s  %(levelname)-8s  %(name)s  %(message)s'


def create_app(configuration):
    """Build the Flask app; every request runs the full login/fetch pipeline."""
    app = Flask(__name__)
    generator = CalendarGenerator()

    @app.errorhandler(DewiError)
    def handle_dewi_error(error):
        logger.error("Request failed with %s: %s", error.kind, error)
        return jsonify({'error': error.kind}), error.status_code

    @app.route('/json', methods=['GET'])
    def get_json():
        reservations = compute_reservations(configuration)
        return jsonify(to_json(reservations))

    @app.route('/ical', methods=['GET'])
    def get_ical():
        reservations = compute_reservations(configuration)
        return Response(
            generator.to_ical(reservations),
            status=200,
            headers={
                'Content-Type': 'text/calendar; charset=utf-8',
                'Content-Disposition': 'inline; filename="reservations.ics"',
                'Cache-Control': 'no-cache, no-store, must-revalidate',
                'Pragma': 'no-cache',
                'Expires': '0',
            },
        )

    return app


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Serve Dewi-online reservations as JSON and iCalendar.")
    parser.add_argument('--host', help="bind address (overrides DIWI_HOST)")
    parser.add_argument('--port', type=config_module.parse_port,
                        help="bind port (overrides DIWI_PORT)")
    parser.add_argument('--debug', action='store_true', help="verbose logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format=LOG_FORMAT,
    )

    load_dotenv(find_dotenv(usecwd=True))

    try:
        configuration = config_module.load()
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    if args.host:
        configuration = replace(configuration, host=args.host)
    if args.port is not None:
        configuration = replace(configuration, port=args.port)

    logger.info("Serving reservations for club %s on http://%s:%d/ical",
                configuration.club, configuration.host, configuration.port)

    app = create_app(configuration)
    app.run(host=configuration.host, port=configuration.port, threaded=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
