from django.db import models
from django.conf import settings


class Workout(models.Model):
    """A training plan (e.g., Push/Pull/Legs) made up of ordered days."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='workouts',
    )
    name = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.name


class WorkoutDay(models.Model):
    """One training day within a plan (e.g., Push Day)."""
    workout = models.ForeignKey(
        Workout,
        on_delete=models.CASCADE,
        related_name='days',
    )
    name = models.CharField(max_length=200)
    order = models.IntegerField()

    class Meta:
        ordering = ['order', 'id']

    def __str__(self):
        return f"{self.workout.name} — {self.name}"


class Exercise(models.Model):
    """An exercise prescribed on a day (e.g., Bench Press: 3 sets x 8 reps @ 60kg)."""
    day = models.ForeignKey(
        WorkoutDay,
        on_delete=models.CASCADE,
        related_name='exercises',
    )
    name = models.CharField(max_length=200)
    sets = models.PositiveIntegerField(null=True, blank=True)
    reps = models.PositiveIntegerField(null=True, blank=True)
    weight = models.FloatField(null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    order = models.IntegerField()
    completed = models.BooleanField(default=False)

    # Per-set tracking: [{"reps": 8, "weight": 60, "completed": false}, ...]
    use_custom_sets = models.BooleanField(default=False)
    set_data = models.JSONField(null=True, blank=True)

    class Meta:
        ordering = ['order', 'id']

    def __str__(self):
        return self.name


class WorkoutSession(models.Model):
    """A completed run through one day of a plan."""
    workout = models.ForeignKey(
        Workout,
        on_delete=models.CASCADE,
        related_name='sessions',
    )
    day = models.ForeignKey(
        WorkoutDay,
        on_delete=models.SET_NULL,
        related_name='sessions',
        null=True,
        blank=True,
    )

    # Names are copied so history survives renames and deleted days
    workout_name = models.CharField(max_length=200)
    day_name = models.CharField(max_length=200)

    started_at = models.DateTimeField()
    completed_at = models.DateTimeField(null=True, blank=True)
    duration_minutes = models.IntegerField(null=True, blank=True)
    total_volume = models.FloatField(null=True, blank=True)
    exercise_count = models.IntegerField(null=True, blank=True)

    class Meta:
        ordering = ['-completed_at', '-id']

    def __str__(self):
        return f"{self.workout_name} — {self.day_name} ({self.started_at:%Y-%m-%d})"


class WorkoutLog(models.Model):
    """A snapshot of one exercise as it was when its day was completed."""
    workout = models.ForeignKey(
        Workout,
        on_delete=models.CASCADE,
        related_name='logs',
    )
    session = models.ForeignKey(
        WorkoutSession,
        on_delete=models.CASCADE,
        related_name='logs',
        null=True,
        blank=True,
    )
    exercise = models.ForeignKey(
        Exercise,
        on_delete=models.SET_NULL,
        related_name='logs',
        null=True,
        blank=True,
    )
    workout_name = models.CharField(max_length=200)
    day_name = models.CharField(max_length=200)
    exercise_name = models.CharField(max_length=200)
    sets = models.PositiveIntegerField(null=True, blank=True)
    reps = models.PositiveIntegerField(null=True, blank=True)
    weight = models.FloatField(null=True, blank=True)
    total_volume = models.FloatField(null=True, blank=True)
    set_data = models.JSONField(null=True, blank=True)
    completed_at = models.DateTimeField()

    class Meta:
        ordering = ['-completed_at', '-id']

    def __str__(self):
        return f"{self.exercise_name}: {self.sets}x{self.reps} @ {self.weight}kg"


class ExerciseLibraryItem(models.Model):
    """A catalogue entry to pick exercises from. Global when user is null."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='library_items',
        null=True,
        blank=True,
    )
    name = models.CharField(max_length=200)
    muscle_group = models.CharField(max_length=100)
    equipment = models.CharField(max_length=100, null=True, blank=True)
    is_custom = models.BooleanField(default=False)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['user', 'name'], name='unique_library_item_per_user'),
        ]
        ordering = ['muscle_group', 'name']

    def __str__(self):
        return f"{self.name} ({self.muscle_group})"


class ScheduledWorkout(models.Model):
    """A day of a plan booked for a calendar date."""
    workout = models.ForeignKey(
        Workout,
        on_delete=models.CASCADE,
        related_name='scheduled',
    )
    day = models.ForeignKey(
        WorkoutDay,
        on_delete=models.CASCADE,
        related_name='scheduled',
    )
    scheduled_date = models.DateField()
    completed = models.BooleanField(default=False)
    notes = models.TextField(null=True, blank=True)

    class Meta:
        ordering = ['scheduled_date', 'id']

    def __str__(self):
        return f"{self.day.name} on {self.scheduled_date}"
