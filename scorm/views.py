"""
Views for the SCORM player
JSON endpoints a content frame bridge uses to reach the RTE API, plus the
read-only progress, event and data views for the display panels
"""
import logging

from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from core.utils.api_response import APIResponse
from core.utils.type_guards import safe_json_loads, safe_get_string, safe_get_list, safe_get_dict

from .api_handler import ScormAPIHandler
from .packages import PackageUploadError, simulate_package_upload
from .player_store import player_store

logger = logging.getLogger(__name__)


def _load_body(request):
    if not request.body:
        return {}
    return safe_json_loads(request.body)


def _wire_args(raw_args):
    """
    RTE arguments are strings. Numbers are accepted and stringified the way a
    browser bridge would; anything else is a malformed call.
    """
    args = []
    for arg in raw_args:
        if isinstance(arg, bool) or not isinstance(arg, (str, int, float)):
            raise ValueError(f"SCORM API arguments must be strings, got {type(arg).__name__}")
        args.append(arg if isinstance(arg, str) else str(arg))
    return args


@csrf_exempt
@require_http_methods(["POST"])
def create_player(request):
    """
    Start a new player for one learning-content attempt.

    Body (all optional): {"package_name": "course.zip", "seed": {element: value}}
    """
    data = _load_body(request)
    if data is None:
        return APIResponse.validation_error({'body': 'Invalid JSON format'})

    package = None
    package_name = safe_get_string(data, 'package_name')
    if package_name:
        try:
            package = simulate_package_upload(package_name)
        except PackageUploadError as e:
            return APIResponse.validation_error({'package_name': str(e)}, message=str(e))

    handler = player_store.create(package=package, seed=safe_get_dict(data, 'seed'))

    return APIResponse.success(
        data={
            'player_id': handler.session.id,
            'api_names': list(ScormAPIHandler.API_NAMES),
            'package': package.to_dict() if package else None,
        },
        message="SCORM player created",
        status_code=201,
    )


@csrf_exempt
@require_http_methods(["POST"])
def rte_call(request, player_id, api_name):
    """
    Invoke one RTE method.

    Body: {"method": "LMSSetValue", "args": ["cmi.core.score.raw", "50"]}
    The RTE result is returned verbatim together with the current error code.
    """
    if api_name not in ScormAPIHandler.API_NAMES:
        return APIResponse.not_found(f"No SCORM API named {api_name}")

    handler = player_store.get(player_id)
    if handler is None:
        return APIResponse.not_found("SCORM player not found")

    data = _load_body(request)
    if data is None:
        return APIResponse.validation_error({'body': 'Invalid JSON format'})

    method = safe_get_string(data, 'method')
    try:
        args = _wire_args(safe_get_list(data, 'args'))
        result = handler.call(method, args)
    except ValueError as e:
        logger.warning(f"Rejected SCORM API call on player {player_id}: {e}")
        return APIResponse.validation_error({'method': str(e)}, message=str(e))
    except Exception as e:
        logger.error(f"Error in SCORM API call {method} on player {player_id}: {e}", exc_info=True)
        return APIResponse.error(message=str(e), error_type='server_error', status_code=500)

    player_store.save(handler)

    return APIResponse.success(data={
        'result': result,
        'error': handler.get_last_error(),
    })


@require_http_methods(["GET"])
def player_progress(request, player_id):
    handler = player_store.get(player_id)
    if handler is None:
        return APIResponse.not_found("SCORM player not found")
    return APIResponse.success(data=handler.get_progress())


@require_http_methods(["GET"])
def player_events(request, player_id):
    handler = player_store.get(player_id)
    if handler is None:
        return APIResponse.not_found("SCORM player not found")
    return APIResponse.success(data={'events': handler.get_events()})


@require_http_methods(["GET"])
def player_data(request, player_id):
    handler = player_store.get(player_id)
    if handler is None:
        return APIResponse.not_found("SCORM player not found")

    session = handler.session
    return APIResponse.success(data={
        'state': session.state,
        'values': handler.get_data(),
        'package': session.package.to_dict() if session.package else None,
    })
