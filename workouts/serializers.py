"""Plain-dict representations of models for JSON responses and exports."""
from .services import day_progress, workout_progress


def _iso(value):
    return value.isoformat() if value else None


def workout_to_dict(workout):
    return {
        'id': workout.id,
        'name': workout.name,
        'description': workout.description,
        'created_at': _iso(workout.created_at),
    }


def day_to_dict(day):
    return {
        'id': day.id,
        'workout_id': day.workout_id,
        'name': day.name,
        'order': day.order,
    }


def exercise_to_dict(exercise):
    return {
        'id': exercise.id,
        'day_id': exercise.day_id,
        'name': exercise.name,
        'sets': exercise.sets,
        'reps': exercise.reps,
        'weight': exercise.weight,
        'notes': exercise.notes,
        'order': exercise.order,
        'completed': exercise.completed,
        'use_custom_sets': exercise.use_custom_sets,
        'set_data': exercise.set_data,
    }


def workout_with_days(workout, include_progress=True):
    """Nested plan: days by order, each with its exercises by order."""
    data = workout_to_dict(workout)
    days = []
    for day in workout.days.all():
        day_data = day_to_dict(day)
        day_data['exercises'] = [exercise_to_dict(e) for e in day.exercises.all()]
        if include_progress:
            day_data['progress'] = day_progress(day)
        days.append(day_data)
    data['days'] = days
    if include_progress:
        data['progress'] = workout_progress(workout)
    return data


def session_to_dict(session):
    return {
        'id': session.id,
        'workout_id': session.workout_id,
        'day_id': session.day_id,
        'workout_name': session.workout_name,
        'day_name': session.day_name,
        'started_at': _iso(session.started_at),
        'completed_at': _iso(session.completed_at),
        'duration_minutes': session.duration_minutes,
        'total_volume': session.total_volume,
        'exercise_count': session.exercise_count,
    }


def log_to_dict(log):
    return {
        'id': log.id,
        'workout_id': log.workout_id,
        'session_id': log.session_id,
        'exercise_id': log.exercise_id,
        'workout_name': log.workout_name,
        'day_name': log.day_name,
        'exercise_name': log.exercise_name,
        'sets': log.sets,
        'reps': log.reps,
        'weight': log.weight,
        'total_volume': log.total_volume,
        'set_data': log.set_data,
        'completed_at': _iso(log.completed_at),
    }


def library_item_to_dict(item):
    return {
        'id': item.id,
        'name': item.name,
        'muscle_group': item.muscle_group,
        'equipment': item.equipment,
        'is_custom': item.is_custom,
    }


def scheduled_to_dict(scheduled):
    return {
        'id': scheduled.id,
        'workout_id': scheduled.workout_id,
        'day_id': scheduled.day_id,
        'scheduled_date': _iso(scheduled.scheduled_date),
        'completed': scheduled.completed,
        'notes': scheduled.notes,
    }
