# core/admin.py
from django.contrib import admin
from .models import AcademicYear, Plan, School, SchoolClass, Section


@admin.register(Plan)
class PlanAdmin(admin.ModelAdmin):
    list_display = ['name', 'student_limit', 'price', 'certificate_printing_allowed', 'custom_domain_enabled']
    search_fields = ['name']


@admin.register(School)
class SchoolAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'school_type', 'plan', 'status', 'trial_ends_at', 'setup_completed']
    list_filter = ['status', 'plan', 'setup_completed', 'country']
    search_fields = ['name', 'slug', 'contact_email']
    readonly_fields = ['slug', 'created_at', 'updated_at']


@admin.register(AcademicYear)
class AcademicYearAdmin(admin.ModelAdmin):
    list_display = ['name', 'school', 'start_date', 'end_date', 'is_current', 'is_setup_complete']
    list_filter = ['is_current', 'is_setup_complete']
    search_fields = ['name', 'school__name']


# Register other core models
admin.site.register(SchoolClass)
admin.site.register(Section)
