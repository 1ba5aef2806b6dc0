import locale
import logging
import sys

from flask import Flask
from werkzeug.serving import make_server

from webapp.config import Settings
from webapp.metrics import build_registry
from webapp.pipeline import Pipeline, counting_stage
from webapp.state import AppState
from webapp.views import bp

logger = logging.getLogger(__name__)


def create_app(state=None):
    """Build the Flask app around ``state``, or a fresh AppState."""
    state = state if state is not None else AppState()
    app = Flask(__name__)
    app.extensions['webapp.state'] = state
    app.extensions['webapp.registry'] = build_registry(state)

    pipeline = Pipeline(state, [counting_stage()])
    pipeline.install(app)
    app.extensions['webapp.pipeline'] = pipeline

    app.register_blueprint(bp)
    return app


def configure_logging(level):
    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def main(environ=None):
    settings = Settings.from_env(environ)
    configure_logging(settings.log_level)
    try:
        locale.setlocale(locale.LC_TIME, '')
    except locale.Error:
        logger.warning('Unsupported locale, page times use the C locale')
    app = create_app()

    # werkzeug reports a busy port on stderr and exits 1 itself
    try:
        server = make_server(settings.host, settings.port, app, threaded=True)
    except OSError:
        logger.exception('Could not start server on %s:%d', settings.host, settings.port)
        sys.exit(1)

    logger.info('App running on port %d', server.port)
    logger.info('Metrics available at http://localhost:%d/metrics', server.port)
    try:
        server.serve_forever()
    finally:
        server.server_close()


if __name__ == '__main__':
    main()
