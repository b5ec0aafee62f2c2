# core/urls.py
from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # ============ SETUP WIZARD ============
    path('setup/academic-year', views.AcademicYearSetupView.as_view(), name='setup_academic_year'),
    path('setup/school-profile', views.SchoolProfileSetupView.as_view(), name='setup_school_profile'),

    # ============ PROVISIONING ============
    path('provisioning/schools', views.ProvisioningSchoolsView.as_view(), name='provisioning_schools'),
]
