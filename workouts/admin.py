from django.contrib import admin
from .models import (
    Exercise, ExerciseLibraryItem, ScheduledWorkout, Workout, WorkoutDay, WorkoutLog, WorkoutSession,
)


class WorkoutDayInline(admin.TabularInline):
    model = WorkoutDay
    extra = 1


class ExerciseInline(admin.TabularInline):
    model = Exercise
    extra = 1


@admin.register(Workout)
class WorkoutAdmin(admin.ModelAdmin):
    list_display = ('name', 'user', 'created_at')
    list_filter = ('user',)
    search_fields = ('name',)
    inlines = [WorkoutDayInline]


@admin.register(WorkoutDay)
class WorkoutDayAdmin(admin.ModelAdmin):
    list_display = ('name', 'workout', 'order')
    list_filter = ('workout',)
    inlines = [ExerciseInline]


@admin.register(Exercise)
class ExerciseAdmin(admin.ModelAdmin):
    list_display = ('name', 'day', 'sets', 'reps', 'weight', 'order', 'completed')
    list_filter = ('completed', 'use_custom_sets')
    search_fields = ('name',)


@admin.register(WorkoutSession)
class WorkoutSessionAdmin(admin.ModelAdmin):
    list_display = ('workout_name', 'day_name', 'started_at', 'duration_minutes', 'total_volume', 'exercise_count')
    list_filter = ('workout',)


@admin.register(WorkoutLog)
class WorkoutLogAdmin(admin.ModelAdmin):
    list_display = ('exercise_name', 'workout_name', 'day_name', 'sets', 'reps', 'weight', 'total_volume', 'completed_at')
    list_filter = ('workout',)
    search_fields = ('exercise_name',)


@admin.register(ExerciseLibraryItem)
class ExerciseLibraryItemAdmin(admin.ModelAdmin):
    list_display = ('name', 'muscle_group', 'equipment', 'is_custom', 'user')
    list_filter = ('muscle_group', 'is_custom')
    search_fields = ('name',)


@admin.register(ScheduledWorkout)
class ScheduledWorkoutAdmin(admin.ModelAdmin):
    list_display = ('workout', 'day', 'scheduled_date', 'completed')
    list_filter = ('completed', 'scheduled_date')
