from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('email', 'is_active', 'is_staff', 'created_at', 'last_login')
    list_filter = ('is_active', 'is_staff')
    search_fields = ('email',)
    readonly_fields = ('password', 'created_at', 'last_login')
    exclude = ('groups', 'user_permissions')
