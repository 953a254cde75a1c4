from django.contrib import admin
from .models import User

@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("id", "username", "yorku_id", "email", "is_active")
    search_fields = ("username", "yorku_id", "email")
