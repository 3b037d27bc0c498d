from ..errors import LinkTrackerError, error_response


def failure_response(ns, action, e):
    if isinstance(e, LinkTrackerError):
        ns.logger.error(f"Error {action}: {e.message}")
        return error_response(e)
    ns.logger.exception(f"Unexpected error {action}")
    return {'error': str(e)}, 500
