from django.contrib import admin
from .models import Fee

@admin.register(Fee)
class FeeAdmin(admin.ModelAdmin):
    list_display = ("fee_id", "user_primary_id", "yorku_id", "fee_type", "fee_status", "balance", "status_time")
    list_filter = ("fee_status", "fee_type")
    search_fields = ("fee_id", "user_primary_id", "yorku_id", "item_barcode")
    readonly_fields = ("created_at", "updated_at")
