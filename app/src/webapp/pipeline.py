import logging

from flask import request

logger = logging.getLogger(__name__)


class Pipeline:
    """Ordered request stages run ahead of route dispatch.

    A stage is called as ``stage(request, state)``. Returning ``None`` hands
    the request to the next stage; anything else is used as the response and
    skips the routes entirely.
    """

    def __init__(self, state, stages=()):
        self.state = state
        self.stages = list(stages)

    def add(self, stage):
        self.stages.append(stage)
        return stage

    def run(self, req):
        for stage in self.stages:
            result = stage(req, self.state)
            if result is not None:
                logger.debug('stage %s answered %s %s', stage.__name__, req.method, req.path)
                return result
        return None

    def install(self, app):
        app.before_request(lambda: self.run(request))


def counting_stage(exempt=('/metrics',)):
    """Build a stage that counts every request except the exempt paths."""
    exempt = frozenset(exempt)

    def count_requests(req, state):
        if req.path not in exempt:
            state.count_request()
        return None

    return count_requests
