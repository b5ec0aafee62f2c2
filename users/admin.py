# users/admin.py
"""
USER ADMIN - accounts and role profiles
Accounts are keyed by email; there is no username.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.contrib.auth.forms import BaseUserCreationForm, UserChangeForm
from django.utils.translation import gettext_lazy as _

from .models import ParentProfile, StaffProfile, StudentProfile, TeacherProfile, User


class AccountCreationForm(BaseUserCreationForm):
    class Meta:
        model = User
        fields = ('email', 'name', 'role', 'school')
        field_classes = {}


class AccountChangeForm(UserChangeForm):
    class Meta:
        model = User
        fields = '__all__'
        field_classes = {}


@admin.register(User)
class AccountAdmin(UserAdmin):
    """Admin for accounts; the role/school binding is enforced by a DB constraint."""
    form = AccountChangeForm
    add_form = AccountCreationForm

    list_display = ('email', 'name', 'role', 'school', 'is_active', 'last_login')
    list_filter = ('role', 'is_active', 'is_staff', 'school')
    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        (_('Personal info'), {'fields': ('name',)}),
        (_('School Context'), {'fields': ('role', 'school')}),
        (_('Permissions'), {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        (_('Important dates'), {'fields': ('last_login', 'date_joined')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'name', 'role', 'school', 'password1', 'password2'),
        }),
    )
    search_fields = ('email', 'name', 'school__name')
    ordering = ('email',)
    raw_id_fields = ('school',)
    filter_horizontal = ('groups', 'user_permissions',)


@admin.register(StudentProfile)
class StudentProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'admission_no', 'school', 'school_class', 'section', 'is_active')
    list_filter = ('is_active', 'gender', 'school')
    search_fields = ('user__email', 'user__name', 'admission_no')
    raw_id_fields = ('user', 'school', 'school_class', 'section')


@admin.register(TeacherProfile)
class TeacherProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'employee_id', 'school', 'designation', 'is_active')
    list_filter = ('is_active', 'school')
    search_fields = ('user__email', 'user__name', 'employee_id')
    raw_id_fields = ('user', 'school')


@admin.register(StaffProfile)
class StaffProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'employee_id', 'school', 'designation', 'is_active')
    list_filter = ('is_active', 'school')
    search_fields = ('user__email', 'user__name', 'employee_id', 'designation')
    raw_id_fields = ('user', 'school')


@admin.register(ParentProfile)
class ParentProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'phone', 'occupation')
    search_fields = ('user__email', 'user__name', 'phone')
    raw_id_fields = ('user',)
