from django.utils import timezone

from .models import Workout, WorkoutLog
from .serializers import log_to_dict, workout_with_days

CSV_HEADER = ['Workout', 'Day', 'Exercise', 'Set Number', 'Reps', 'Weight (KG)', 'Completed', 'Notes']


def export_payload(user):
    """Everything the user owns, shaped so ``import_workouts`` can read it back."""
    workouts = (
        Workout.objects.filter(user=user)
        .prefetch_related('days__exercises')
        .order_by('created_at', 'id')
    )
    logs = WorkoutLog.objects.filter(workout__user=user)
    return {
        'workouts': [workout_with_days(w, include_progress=False) for w in workouts],
        'logs': [log_to_dict(l) for l in logs],
        'exported_at': timezone.now().isoformat(),
    }


def _quote(text):
    return '"' + str(text or '').replace('"', '""') + '"'


def _number(value):
    if value is None:
        return ''
    return str(int(value)) if value == int(value) else str(value)


def _row(workout, day, exercise, number, reps, weight, completed):
    return ','.join([
        _quote(workout['name']),
        _quote(day['name']),
        _quote(exercise['name']),
        str(number),
        _number(reps),
        _number(weight or 0),
        'Yes' if completed else 'No',
        _quote(exercise.get('notes')),
    ])


def workouts_as_csv(workouts):
    """One row per tracked set, or per prescribed set when nothing was tracked.

    Text cells are always quoted; numbers and Yes/No are written bare and a
    missing rep count leaves its cell empty.
    """
    rows = [','.join(CSV_HEADER)]
    for workout in workouts:
        for day in workout.get('days') or []:
            for exercise in day.get('exercises') or []:
                set_data = exercise.get('set_data')
                if set_data:
                    for number, s in enumerate(set_data, start=1):
                        rows.append(_row(
                            workout, day, exercise, number,
                            s.get('reps') or exercise.get('reps'),
                            s.get('weight'),
                            s.get('completed'),
                        ))
                else:
                    for number in range(1, (exercise.get('sets') or 0) + 1):
                        rows.append(_row(
                            workout, day, exercise, number,
                            exercise.get('reps'), exercise.get('weight'), False,
                        ))
    return '\n'.join(rows) + '\n'
