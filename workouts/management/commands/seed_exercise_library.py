from django.core.management.base import BaseCommand
from workouts.models import ExerciseLibraryItem


DEFAULT_LIBRARY = [
    # Chest
    {"name": "Bench Press", "muscle_group": "Chest", "equipment": "Barbell"},
    {"name": "Incline Bench Press", "muscle_group": "Chest", "equipment": "Barbell"},
    {"name": "Dumbbell Fly", "muscle_group": "Chest", "equipment": "Dumbbells"},
    {"name": "Cable Crossover", "muscle_group": "Chest", "equipment": "Cable"},
    {"name": "Push-ups", "muscle_group": "Chest", "equipment": "Bodyweight"},
    {"name": "Chest Dips", "muscle_group": "Chest", "equipment": "Bodyweight"},
    # Back
    {"name": "Deadlift", "muscle_group": "Back", "equipment": "Barbell"},
    {"name": "Bent Over Row", "muscle_group": "Back", "equipment": "Barbell"},
    {"name": "Pull-ups", "muscle_group": "Back", "equipment": "Bodyweight"},
    {"name": "Lat Pulldown", "muscle_group": "Back", "equipment": "Cable"},
    {"name": "Seated Cable Row", "muscle_group": "Back", "equipment": "Cable"},
    {"name": "T-Bar Row", "muscle_group": "Back", "equipment": "Barbell"},
    {"name": "Dumbbell Row", "muscle_group": "Back", "equipment": "Dumbbells"},
    # Shoulders
    {"name": "Overhead Press", "muscle_group": "Shoulders", "equipment": "Barbell"},
    {"name": "Lateral Raise", "muscle_group": "Shoulders", "equipment": "Dumbbells"},
    {"name": "Front Raise", "muscle_group": "Shoulders", "equipment": "Dumbbells"},
    {"name": "Face Pull", "muscle_group": "Shoulders", "equipment": "Cable"},
    {"name": "Arnold Press", "muscle_group": "Shoulders", "equipment": "Dumbbells"},
    {"name": "Reverse Fly", "muscle_group": "Shoulders", "equipment": "Dumbbells"},
    # Legs
    {"name": "Squat", "muscle_group": "Legs", "equipment": "Barbell"},
    {"name": "Leg Press", "muscle_group": "Legs", "equipment": "Machine"},
    {"name": "Romanian Deadlift", "muscle_group": "Legs", "equipment": "Barbell"},
    {"name": "Lunges", "muscle_group": "Legs", "equipment": "Dumbbells"},
    {"name": "Leg Curl", "muscle_group": "Legs", "equipment": "Machine"},
    {"name": "Leg Extension", "muscle_group": "Legs", "equipment": "Machine"},
    {"name": "Calf Raises", "muscle_group": "Legs", "equipment": "Machine"},
    {"name": "Hip Thrust", "muscle_group": "Legs", "equipment": "Barbell"},
    # Arms
    {"name": "Barbell Curl", "muscle_group": "Arms", "equipment": "Barbell"},
    {"name": "Hammer Curl", "muscle_group": "Arms", "equipment": "Dumbbells"},
    {"name": "Tricep Pushdown", "muscle_group": "Arms", "equipment": "Cable"},
    {"name": "Skull Crusher", "muscle_group": "Arms", "equipment": "Barbell"},
    {"name": "Preacher Curl", "muscle_group": "Arms", "equipment": "Barbell"},
    {"name": "Overhead Tricep Extension", "muscle_group": "Arms", "equipment": "Dumbbells"},
    # Core
    {"name": "Plank", "muscle_group": "Core", "equipment": "Bodyweight"},
    {"name": "Hanging Leg Raise", "muscle_group": "Core", "equipment": "Bodyweight"},
    {"name": "Cable Crunch", "muscle_group": "Core", "equipment": "Cable"},
    {"name": "Russian Twist", "muscle_group": "Core", "equipment": "Bodyweight"},
    {"name": "Ab Wheel Rollout", "muscle_group": "Core", "equipment": "Ab Wheel"},
]


class Command(BaseCommand):
    help = "Load the default global exercise library (user=None)."

    def handle(self, *args, **options):
        created_count = 0
        for item in DEFAULT_LIBRARY:
            _, created = ExerciseLibraryItem.objects.get_or_create(
                user=None,
                name=item["name"],
                defaults={
                    "muscle_group": item["muscle_group"],
                    "equipment": item["equipment"],
                    "is_custom": False,
                },
            )
            if created:
                created_count += 1
        self.stdout.write(self.style.SUCCESS(
            f"Done. {created_count} library exercises created, "
            f"{len(DEFAULT_LIBRARY) - created_count} already existed."
        ))
