from datetime import datetime, timezone

from flask import Blueprint, Response, current_app, jsonify

from webapp.metrics import render

bp = Blueprint('webapp', __name__)

HOME_PAGE = '''
    <h1>🚀 My DevOps Web App</h1>
    <p>This app was deployed automatically!</p>
    <p>Current time: {now}</p>
    <p>Total requests: {requests}</p>
'''


def _state():
    return current_app.extensions['webapp.state']


@bp.route('/')
def home():
    return HOME_PAGE.format(
        now=datetime.now().strftime('%c'),
        requests=_state().request_count,
    )


@bp.route('/health')
def health():
    """Health check polled by the deployment pipeline."""
    state = _state()
    state.count_health_check()
    now = datetime.now(timezone.utc).isoformat(timespec='milliseconds')
    return jsonify({
        'status': 'healthy',
        'time': now.replace('+00:00', 'Z'),
        'uptime': state.uptime(),
        'requests': state.request_count,
    }), 200


@bp.route('/metrics')
def metrics_view():
    body, content_type = render(current_app.extensions['webapp.registry'])
    return Response(body, status=200, content_type=content_type)
