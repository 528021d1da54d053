import logging
import math
from collections import defaultdict
from datetime import timedelta

from django.db import transaction
from django.db.models import Max
from django.shortcuts import get_object_or_404
from django.utils import timezone

from .forms import MAX_SETS, DayForm, ExerciseForm, WorkoutForm
from .models import (
    Exercise, ScheduledWorkout, Workout, WorkoutDay, WorkoutLog, WorkoutSession,
)

logger = logging.getLogger(__name__)

TREND_WINDOW_DAYS = 30
TREND_THRESHOLD_KG = 0.5
CHART_POINTS = 10


def round_half_up(value):
    return int(math.floor(value + 0.5))


# --- Ownership -------------------------------------------------------------

def get_owned_workout(user, pk):
    return get_object_or_404(Workout, pk=pk, user=user)


def get_owned_day(user, pk):
    return get_object_or_404(WorkoutDay.objects.select_related('workout'), pk=pk, workout__user=user)


def get_owned_exercise(user, pk):
    return get_object_or_404(Exercise, pk=pk, day__workout__user=user)


def get_owned_schedule(user, pk):
    return get_object_or_404(ScheduledWorkout, pk=pk, workout__user=user)


def next_order(queryset):
    highest = queryset.aggregate(highest=Max('order'))['highest']
    return 0 if highest is None else highest + 1


# --- Set data --------------------------------------------------------------

def initialize_set_data(exercise):
    """One untouched set per prescribed set, seeded from the exercise's reps/weight."""
    return [
        {'weight': exercise.weight or 0, 'reps': exercise.reps or 0, 'completed': False}
        for _ in range(min(exercise.sets or 0, MAX_SETS))
    ]


def are_all_sets_complete(set_data):
    return bool(set_data) and all(s.get('completed') for s in set_data)


def _check_set_index(set_data, index):
    if not set_data or not 0 <= index < len(set_data):
        raise ValueError(f"Set {index} does not exist.")


def toggle_set_completion(set_data, index):
    """Return (updated set data, whether every set is now complete)."""
    _check_set_index(set_data, index)
    updated = [
        {**s, 'completed': not s.get('completed', False)} if i == index else s
        for i, s in enumerate(set_data)
    ]
    return updated, are_all_sets_complete(updated)


def adjust_set_weight(set_data, index, delta):
    _check_set_index(set_data, index)
    return [
        {**s, 'weight': max(0, (s.get('weight') or 0) + delta)} if i == index else s
        for i, s in enumerate(set_data)
    ]


def set_volume(set_data):
    """Sum of reps x weight across sets, or None when there is no per-set data."""
    if set_data is None:
        return None
    return sum((s.get('reps') or 0) * (s.get('weight') or 0) for s in set_data)


# --- Progress --------------------------------------------------------------

def _progress(exercises):
    total = len(exercises)
    completed = sum(1 for e in exercises if e.completed)
    return {
        'completed': completed,
        'total': total,
        'percentage': round_half_up(completed / total * 100) if total else 0,
    }


def day_progress(day):
    return _progress(list(day.exercises.all()))


def workout_progress(workout):
    return _progress([e for day in workout.days.all() for e in day.exercises.all()])


# --- Ordering --------------------------------------------------------------

def _renumber(queryset, ids, label):
    valid_ids = set(queryset.values_list('id', flat=True))
    if not isinstance(ids, list):
        raise ValueError(f"Expected a list of {label} ids.")
    for pk in ids:
        if isinstance(pk, bool) or not isinstance(pk, int) or pk not in valid_ids:
            raise ValueError(f"Invalid {label} ID in reorder list")

    with transaction.atomic():
        for position, pk in enumerate(ids):
            queryset.filter(pk=pk).update(order=position)


def reorder_days(workout, day_ids):
    _renumber(workout.days.all(), day_ids, 'day')


def reorder_exercises(day, exercise_ids):
    _renumber(day.exercises.all(), exercise_ids, 'exercise')


@transaction.atomic
def duplicate_day(day):
    """Copy a day and its exercises right after the original, with completion reset."""
    copy = WorkoutDay.objects.create(
        workout=day.workout,
        name=f"{day.name} (Copy)",
        order=day.order + 1,
    )
    Exercise.objects.bulk_create([
        Exercise(
            day=copy,
            name=e.name,
            sets=e.sets,
            reps=e.reps,
            weight=e.weight,
            notes=e.notes,
            order=e.order,
            use_custom_sets=e.use_custom_sets,
            set_data=e.set_data,
        )
        for e in day.exercises.all()
    ])
    return copy


# --- Completing a day ------------------------------------------------------

@transaction.atomic
def complete_day(user, workout_id, day_id, started_at=None):
    """
    Record a finished training day: one session row, one log row per exercise,
    and every exercise on the day flagged completed.
    """
    workout = get_owned_workout(user, workout_id)
    day = get_object_or_404(WorkoutDay, pk=day_id, workout=workout)
    exercises = list(day.exercises.all())

    now = timezone.now()
    started_at = started_at or now
    duration = round_half_up((now - started_at).total_seconds() / 60)

    session = WorkoutSession.objects.create(
        workout=workout,
        day=day,
        workout_name=workout.name,
        day_name=day.name,
        started_at=started_at,
        completed_at=now,
        duration_minutes=duration,
        total_volume=sum(set_volume(e.set_data) or 0 for e in exercises),
        exercise_count=len(exercises),
    )

    WorkoutLog.objects.bulk_create([
        WorkoutLog(
            workout=workout,
            session=session,
            exercise=e,
            workout_name=workout.name,
            day_name=day.name,
            exercise_name=e.name,
            sets=e.sets,
            reps=e.reps,
            weight=e.weight,
            set_data=e.set_data,
            total_volume=set_volume(e.set_data),
            completed_at=now,
        )
        for e in exercises
    ])

    day.exercises.update(completed=True)

    logger.info(
        "Completed day %s of workout %s: %d exercises, volume %s",
        day.pk, workout.pk, len(exercises), session.total_volume,
    )
    return session


# --- Statistics ------------------------------------------------------------

def exercise_progress_stats(logs, now=None):
    """
    Summarise logs per exercise name: best weight, latest numbers,
    a 30-day trend and the points for a weight chart.
    """
    now = now or timezone.now()
    threshold = now - timedelta(days=TREND_WINDOW_DAYS)

    by_exercise = defaultdict(list)
    for log in logs:
        by_exercise[log.exercise_name].append(log)

    stats = []
    for name in sorted(by_exercise):
        newest_first = sorted(by_exercise[name], key=lambda l: l.completed_at, reverse=True)
        weights = [l.weight or 0 for l in newest_first]

        recent = [l.weight or 0 for l in newest_first if l.completed_at > threshold]
        older = [l.weight or 0 for l in newest_first if l.completed_at <= threshold]

        trend, trend_value = 'same', 0.0
        if recent and older:
            trend_value = sum(recent) / len(recent) - sum(older) / len(older)
            if trend_value > TREND_THRESHOLD_KG:
                trend = 'up'
            elif trend_value < -TREND_THRESHOLD_KG:
                trend = 'down'

        stats.append({
            'name': name,
            'total_sessions': len(newest_first),
            'pr': max(weights + [0]),
            'last_weight': weights[0],
            'last_reps': newest_first[0].reps or 0,
            'trend': trend,
            'trend_value': abs(trend_value),
            'chart': [
                {
                    'date': l.completed_at.strftime('%m/%d'),
                    'weight': l.weight or 0,
                    'reps': l.reps,
                }
                for l in reversed(newest_first[:CHART_POINTS])
            ],
        })
    return stats


# --- Bulk data -------------------------------------------------------------

def delete_user_data(user):
    """Remove every plan the user owns; days, exercises, logs and sessions cascade."""
    deleted, _ = Workout.objects.filter(user=user).delete()
    return deleted


def _validated(form_class, data, label):
    """Run one imported object through the same form the API uses for it."""
    if not isinstance(data, dict):
        raise ValueError(f"Every {label} must be an object.")
    form = form_class(data)
    if not form.is_valid():
        problems = "; ".join(
            f"{field}: {' '.join(messages)}" for field, messages in form.errors.items()
        )
        raise ValueError(f"Invalid {label}: {problems}")
    return form.save(commit=False)


@transaction.atomic
def import_workouts(user, workouts, replace_existing=False):
    """
    Recreate exported plans for ``user`` with fresh ids.

    Raises ``ValueError`` on malformed input; nothing is written in that case.
    """
    if not isinstance(workouts, list):
        raise ValueError("Import file must contain a list of workouts.")

    if replace_existing:
        delete_user_data(user)

    created = 0
    for w in workouts:
        workout = _validated(WorkoutForm, w, "workout")
        workout.user = user
        workout.save()
        for day_position, d in enumerate(w.get('days') or []):
            day = _validated(DayForm, d, f"day in '{workout.name}'")
            day.workout = workout
            if day.order is None:
                day.order = day_position
            day.save()
            exercises = []
            for position, e in enumerate(d.get('exercises') or []):
                exercise = _validated(ExerciseForm, e, f"exercise in '{day.name}'")
                exercise.day = day
                if exercise.order is None:
                    exercise.order = position
                exercises.append(exercise)
            Exercise.objects.bulk_create(exercises)
        created += 1

    logger.info("Imported %d workouts for user %s (replace=%s)", created, user.pk, replace_existing)
    return created
