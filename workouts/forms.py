from numbers import Number

from django import forms
from django.core.exceptions import ValidationError

from .models import Exercise, ExerciseLibraryItem, Workout, WorkoutDay

MAX_SETS = 50
MAX_REPS = 1000


def validate_set_data(value):
    """Check per-set tracking data: a list of {reps?, weight?, completed?} objects.

    Unknown keys are allowed and kept.
    """
    if value is None:
        return
    if not isinstance(value, list):
        raise ValidationError("set_data must be a list of sets.")
    if len(value) > MAX_SETS:
        raise ValidationError(f"set_data can hold at most {MAX_SETS} sets.")
    for i, entry in enumerate(value, start=1):
        if not isinstance(entry, dict):
            raise ValidationError(f"Set {i} must be an object.")
        for key in ('reps', 'weight'):
            if key in entry and entry[key] is not None:
                if isinstance(entry[key], bool) or not isinstance(entry[key], Number):
                    raise ValidationError(f"Set {i}: {key} must be a number.")
        if 'completed' in entry and not isinstance(entry['completed'], bool):
            raise ValidationError(f"Set {i}: completed must be true or false.")


class WorkoutForm(forms.ModelForm):
    class Meta:
        model = Workout
        fields = ['name', 'description']


class DayForm(forms.ModelForm):
    # Defaults to the next free position
    order = forms.IntegerField(required=False)

    class Meta:
        model = WorkoutDay
        fields = ['name', 'order']


class ExerciseForm(forms.ModelForm):
    order = forms.IntegerField(required=False)
    sets = forms.IntegerField(required=False, min_value=0, max_value=MAX_SETS)
    reps = forms.IntegerField(required=False, min_value=0, max_value=MAX_REPS)
    weight = forms.FloatField(required=False, min_value=0)
    set_data = forms.JSONField(required=False, validators=[validate_set_data])

    class Meta:
        model = Exercise
        fields = [
            'name', 'sets', 'reps', 'weight', 'notes', 'order',
            'completed', 'use_custom_sets', 'set_data',
        ]


class LibraryItemForm(forms.ModelForm):
    class Meta:
        model = ExerciseLibraryItem
        fields = ['name', 'muscle_group', 'equipment']


class ScheduleForm(forms.Form):
    workout_id = forms.IntegerField()
    day_id = forms.IntegerField()
    scheduled_date = forms.DateField()
    notes = forms.CharField(required=False)


class CompleteDayForm(forms.Form):
    started_at = forms.DateTimeField(required=False)
