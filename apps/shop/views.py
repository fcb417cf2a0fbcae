import logging
from functools import wraps

from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_protect
from django.views.decorators.http import require_http_methods

from .services.dashboard import dashboard_stats
from .services.product_save import get_max_images
from .services.uploads import delete_upload, store_upload, validate_upload

logger = logging.getLogger(__name__)


def login_required_json(view_func):
    """Like login_required, but answers 401 JSON instead of redirecting."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return JsonResponse({'status': 'error', 'message': 'Não autorizado'}, status=401)
        return view_func(request, *args, **kwargs)
    return wrapper


# =============================================================================
# Dashboard
# =============================================================================

@login_required_json
@require_http_methods(["GET"])
def dashboard_data(request):
    """Counters and recent products for the panel home."""
    try:
        stats = dashboard_stats()
    except DatabaseError:
        logger.exception("Dashboard load failed")
        return JsonResponse({'status': 'error', 'message': 'Erro ao carregar painel'}, status=500)
    return JsonResponse({'status': 'ok', **stats})


# =============================================================================
# Product images
# =============================================================================

@login_required_json
@require_http_methods(["POST"])
@csrf_protect
def image_upload(request):
    """
    Upload product photos. Returns [{url, path, alt}] in upload order.

    `existing` is the number of images the product already has; the batch is
    rejected as a whole if it would go over the per-product maximum.
    """
    files = request.FILES.getlist('images')
    if not files:
        return JsonResponse({'status': 'error', 'message': 'Nenhuma imagem enviada'}, status=400)

    try:
        existing = int(request.POST.get('existing') or 0)
    except ValueError:
        return JsonResponse({'status': 'error', 'message': 'Valor inválido para existing'}, status=400)
    if existing < 0:
        return JsonResponse({'status': 'error', 'message': 'Valor inválido para existing'}, status=400)

    max_images = get_max_images()
    if existing + len(files) > max_images:
        return JsonResponse({
            'status': 'error',
            'message': f'Você pode adicionar no máximo {max_images} imagens',
        }, status=400)

    try:
        for file in files:
            validate_upload(file)
    except ValidationError as exc:
        return JsonResponse({'status': 'error', 'message': exc.messages[0]}, status=400)

    uploaded = []
    try:
        for file in files:
            uploaded.append(store_upload(file))
    except (ValidationError, OSError) as exc:
        # Keep the batch all-or-nothing
        for image in uploaded:
            delete_upload(image['path'])
        if isinstance(exc, ValidationError):
            return JsonResponse({'status': 'error', 'message': exc.messages[0]}, status=400)
        logger.exception("Image upload failed")
        return JsonResponse({'status': 'error', 'message': 'Erro ao enviar imagens'}, status=500)

    return JsonResponse({
        'status': 'ok',
        'uploaded': len(uploaded),
        'images': uploaded,
    })


@login_required_json
@require_http_methods(["POST"])
@csrf_protect
def image_delete(request):
    """Remove a stored photo. Missing files are not an error."""
    path = request.POST.get('path', '').strip()
    if not path:
        return JsonResponse({'status': 'error', 'message': 'Caminho não informado'}, status=400)

    try:
        removed = delete_upload(path)
    except OSError:
        logger.exception("Image delete failed (%s)", path)
        removed = False
    return JsonResponse({'status': 'ok', 'removed': removed})
