import datetime
import logging
from functools import wraps
from numbers import Number

from django.core.exceptions import ValidationError
from django.db.models import Q
from django.http import Http404, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from accounts.decorators import api_login_required
from accounts.utils import form_error, json_error, read_json

from . import services
from .exports import export_payload, workouts_as_csv
from .forms import CompleteDayForm, DayForm, ExerciseForm, LibraryItemForm, ScheduleForm, WorkoutForm
from .models import ExerciseLibraryItem, ScheduledWorkout, Workout, WorkoutDay, WorkoutLog, WorkoutSession
from .serializers import (
    day_to_dict, exercise_to_dict, library_item_to_dict, log_to_dict,
    scheduled_to_dict, session_to_dict, workout_to_dict, workout_with_days,
)

logger = logging.getLogger(__name__)

LIBRARY_SEARCH_LIMIT = 20


def json_errors(view_func):
    """Turn lookup and validation failures raised inside a view into JSON errors."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        try:
            return view_func(request, *args, **kwargs)
        except Http404:
            return json_error('Not found.', status=404)
        except ValidationError as e:
            return json_error('; '.join(e.messages))
        except (ValueError, TypeError) as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Unhandled error in %s", view_func.__name__)
            return json_error('Internal server error', status=500)
    return wrapper


def _prefetched_workout(user, pk):
    return get_object_or_404(
        Workout.objects.prefetch_related('days__exercises'), pk=pk, user=user
    )


def _fill_exercise_defaults(exercise):
    if exercise.order is None:
        exercise.order = services.next_order(exercise.day.exercises.all())
    if exercise.use_custom_sets and not exercise.set_data:
        exercise.set_data = services.initialize_set_data(exercise)


# --- Workouts --------------------------------------------------------------

@api_login_required
@require_http_methods(['GET', 'POST'])
@json_errors
def workout_collection(request):
    if request.method == 'POST':
        form = WorkoutForm(read_json(request))
        if not form.is_valid():
            return form_error(form)
        workout = form.save(commit=False)
        workout.user = request.user
        workout.save()
        return JsonResponse(workout_to_dict(workout), status=201)

    workouts = Workout.objects.filter(user=request.user)
    return JsonResponse([workout_to_dict(w) for w in workouts], safe=False)


@api_login_required
@require_http_methods(['GET', 'DELETE'])
@json_errors
def workout_detail(request, pk):
    if request.method == 'DELETE':
        # Deleting a missing or foreign plan is a no-op
        Workout.objects.filter(pk=pk, user=request.user).delete()
        return HttpResponse(status=204)

    workout = _prefetched_workout(request.user, pk)
    return JsonResponse(workout_with_days(workout))


# --- Days ------------------------------------------------------------------

@api_login_required
@require_POST
@json_errors
def day_create(request, workout_id):
    workout = services.get_owned_workout(request.user, workout_id)
    form = DayForm(read_json(request))
    if not form.is_valid():
        return form_error(form)
    day = form.save(commit=False)
    day.workout = workout
    if day.order is None:
        day.order = services.next_order(workout.days.all())
    day.save()
    return JsonResponse(day_to_dict(day), status=201)


@api_login_required
@require_POST
@json_errors
def day_reorder(request, workout_id):
    workout = services.get_owned_workout(request.user, workout_id)
    services.reorder_days(workout, read_json(request).get('day_ids'))
    return JsonResponse({'success': True})


@api_login_required
@require_http_methods(['DELETE'])
@json_errors
def day_delete(request, pk):
    day = services.get_owned_day(request.user, pk)
    day.delete()
    return HttpResponse(status=204)


@api_login_required
@require_POST
@json_errors
def day_duplicate(request, pk):
    day = services.get_owned_day(request.user, pk)
    copy = services.duplicate_day(day)
    return JsonResponse(day_to_dict(copy), status=201)


@api_login_required
@require_POST
@json_errors
def day_complete(request, workout_id, day_id):
    form = CompleteDayForm(read_json(request))
    if not form.is_valid():
        return form_error(form)
    session = services.complete_day(
        request.user, workout_id, day_id, started_at=form.cleaned_data['started_at'],
    )
    return JsonResponse(session_to_dict(session), status=201)


# --- Exercises -------------------------------------------------------------

@api_login_required
@require_POST
@json_errors
def exercise_create(request, day_id):
    day = services.get_owned_day(request.user, day_id)
    form = ExerciseForm(read_json(request))
    if not form.is_valid():
        return form_error(form)
    exercise = form.save(commit=False)
    exercise.day = day
    _fill_exercise_defaults(exercise)
    exercise.save()
    return JsonResponse(exercise_to_dict(exercise), status=201)


@api_login_required
@require_POST
@json_errors
def exercise_reorder(request, day_id):
    day = services.get_owned_day(request.user, day_id)
    services.reorder_exercises(day, read_json(request).get('exercise_ids'))
    return JsonResponse({'success': True})


@api_login_required
@require_http_methods(['PATCH', 'DELETE'])
@json_errors
def exercise_detail(request, pk):
    exercise = services.get_owned_exercise(request.user, pk)

    if request.method == 'DELETE':
        exercise.delete()
        return HttpResponse(status=204)

    # Partial update: unspecified fields keep their current values
    fields = ExerciseForm.Meta.fields
    data = {name: getattr(exercise, name) for name in fields}
    data.update({k: v for k, v in read_json(request).items() if k in fields})

    form = ExerciseForm(data, instance=exercise)
    if not form.is_valid():
        return form_error(form)
    exercise = form.save(commit=False)
    _fill_exercise_defaults(exercise)
    exercise.save()
    return JsonResponse(exercise_to_dict(exercise))


@api_login_required
@require_POST
@json_errors
def exercise_set_toggle(request, pk, index):
    exercise = services.get_owned_exercise(request.user, pk)
    set_data = exercise.set_data or services.initialize_set_data(exercise)
    exercise.set_data, exercise.completed = services.toggle_set_completion(set_data, index)
    exercise.save(update_fields=['set_data', 'completed'])
    return JsonResponse(exercise_to_dict(exercise))


@api_login_required
@require_POST
@json_errors
def exercise_set_weight(request, pk, index):
    exercise = services.get_owned_exercise(request.user, pk)
    delta = read_json(request).get('delta')
    if isinstance(delta, bool) or not isinstance(delta, Number):
        return json_error('delta must be a number.')
    set_data = exercise.set_data or services.initialize_set_data(exercise)
    exercise.set_data = services.adjust_set_weight(set_data, index, delta)
    exercise.save(update_fields=['set_data'])
    return JsonResponse(exercise_to_dict(exercise))


# --- History ---------------------------------------------------------------

@api_login_required
@require_GET
def session_list(request):
    sessions = WorkoutSession.objects.filter(workout__user=request.user)
    return JsonResponse([session_to_dict(s) for s in sessions], safe=False)


@api_login_required
@require_GET
def log_list(request):
    logs = WorkoutLog.objects.filter(workout__user=request.user)
    return JsonResponse([log_to_dict(l) for l in logs], safe=False)


@api_login_required
@require_GET
def logs_by_exercise(request, name):
    logs = WorkoutLog.objects.filter(workout__user=request.user, exercise_name=name)
    return JsonResponse([log_to_dict(l) for l in logs], safe=False)


@api_login_required
@require_GET
def progress(request):
    """Per-exercise records and trends built from the logged history."""
    logs = WorkoutLog.objects.filter(workout__user=request.user)
    return JsonResponse(services.exercise_progress_stats(logs), safe=False)


# --- Exercise library ------------------------------------------------------

def _library_for(user):
    return ExerciseLibraryItem.objects.filter(Q(user=user) | Q(user__isnull=True))


@api_login_required
@require_http_methods(['GET', 'POST'])
@json_errors
def library_collection(request):
    if request.method == 'POST':
        form = LibraryItemForm(read_json(request))
        if not form.is_valid():
            return form_error(form)
        name = form.cleaned_data['name'].strip()

        # Check if it already exists for this user or globally
        if _library_for(request.user).filter(name__iexact=name).exists():
            return json_error('Exercise already exists.')

        item = form.save(commit=False)
        item.name = name
        item.user = request.user
        item.is_custom = True
        item.save()
        return JsonResponse(library_item_to_dict(item), status=201)

    return JsonResponse([library_item_to_dict(i) for i in _library_for(request.user)], safe=False)


@api_login_required
@require_GET
def library_search(request):
    query = request.GET.get('q', '').strip()
    items = _library_for(request.user)
    if query:
        items = items.filter(name__icontains=query)
    items = items.order_by('name')[:LIBRARY_SEARCH_LIMIT]
    return JsonResponse([library_item_to_dict(i) for i in items], safe=False)


# --- Schedule --------------------------------------------------------------

@api_login_required
@require_http_methods(['GET', 'POST'])
@json_errors
def schedule_collection(request):
    if request.method == 'POST':
        form = ScheduleForm(read_json(request))
        if not form.is_valid():
            return form_error(form)
        workout = services.get_owned_workout(request.user, form.cleaned_data['workout_id'])
        day = get_object_or_404(WorkoutDay, pk=form.cleaned_data['day_id'], workout=workout)
        scheduled = ScheduledWorkout.objects.create(
            workout=workout,
            day=day,
            scheduled_date=form.cleaned_data['scheduled_date'],
            notes=form.cleaned_data['notes'] or None,
        )
        return JsonResponse(scheduled_to_dict(scheduled), status=201)

    scheduled = ScheduledWorkout.objects.filter(workout__user=request.user)
    return JsonResponse([scheduled_to_dict(s) for s in scheduled], safe=False)


@api_login_required
@require_GET
def schedule_today(request):
    scheduled = ScheduledWorkout.objects.filter(
        workout__user=request.user,
        scheduled_date=timezone.localdate(),
    )
    return JsonResponse([scheduled_to_dict(s) for s in scheduled], safe=False)


@api_login_required
@require_http_methods(['DELETE'])
@json_errors
def schedule_delete(request, pk):
    services.get_owned_schedule(request.user, pk).delete()
    return HttpResponse(status=204)


@api_login_required
@require_POST
@json_errors
def schedule_complete(request, pk):
    scheduled = services.get_owned_schedule(request.user, pk)
    scheduled.completed = True
    scheduled.save(update_fields=['completed'])
    return JsonResponse(scheduled_to_dict(scheduled))


# --- Data management -------------------------------------------------------

@api_login_required
@require_GET
def data_export(request):
    return JsonResponse(export_payload(request.user))


@api_login_required
@require_GET
def data_export_csv(request):
    content = workouts_as_csv(export_payload(request.user)['workouts'])
    filename = f"workouts-{datetime.date.today().isoformat()}.csv"
    response = HttpResponse(content, content_type='text/csv')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


@api_login_required
@require_POST
@json_errors
def data_import(request):
    data = read_json(request)
    workouts = data.get('workouts')
    if not isinstance(workouts, list):
        return json_error('Import file must contain a list of workouts.')
    services.import_workouts(request.user, workouts, bool(data.get('replace_existing')))
    return JsonResponse({'success': True})


@api_login_required
@require_http_methods(['POST', 'DELETE'])
@json_errors
def data_reset(request):
    services.delete_user_data(request.user)
    logger.info("Reset all data for user %s", request.user.pk)
    return JsonResponse({'success': True})
