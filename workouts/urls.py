from django.urls import path
from . import views

urlpatterns = [
    path('workouts', views.workout_collection, name='workout_collection'),
    path('workouts/<int:pk>', views.workout_detail, name='workout_detail'),
    path('workouts/<int:workout_id>/days', views.day_create, name='day_create'),
    path('workouts/<int:workout_id>/days/reorder', views.day_reorder, name='day_reorder'),
    path('workouts/<int:workout_id>/days/<int:day_id>/complete', views.day_complete, name='day_complete'),
    path('days/<int:pk>', views.day_delete, name='day_delete'),
    path('days/<int:pk>/duplicate', views.day_duplicate, name='day_duplicate'),
    path('days/<int:day_id>/exercises', views.exercise_create, name='exercise_create'),
    path('days/<int:day_id>/exercises/reorder', views.exercise_reorder, name='exercise_reorder'),
    path('exercises/<int:pk>', views.exercise_detail, name='exercise_detail'),
    path('exercises/<int:pk>/sets/<int:index>/toggle', views.exercise_set_toggle, name='exercise_set_toggle'),
    path('exercises/<int:pk>/sets/<int:index>/weight', views.exercise_set_weight, name='exercise_set_weight'),
    path('sessions', views.session_list, name='session_list'),
    path('logs', views.log_list, name='log_list'),
    path('logs/exercise/<str:name>', views.logs_by_exercise, name='logs_by_exercise'),
    path('progress', views.progress, name='progress'),
    path('exercise-library', views.library_collection, name='library_collection'),
    path('exercise-library/search', views.library_search, name='library_search'),
    path('schedule', views.schedule_collection, name='schedule_collection'),
    path('schedule/today', views.schedule_today, name='schedule_today'),
    path('schedule/<int:pk>', views.schedule_delete, name='schedule_delete'),
    path('schedule/<int:pk>/complete', views.schedule_complete, name='schedule_complete'),
    path('data/export', views.data_export, name='data_export'),
    path('data/export.csv', views.data_export_csv, name='data_export_csv'),
    path('data/import', views.data_import, name='data_import'),
    path('data/reset', views.data_reset, name='data_reset'),
    ]
