# core/views.py
"""
CORE API VIEWS - setup wizard and tenant provisioning
Thin views: parse, call the service, serialize. Business rules live in core.services.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

# SHARED IMPORTS
from users.permissions import HasSchoolContext, IsSuperAdmin

from .exceptions import SchoolManagementException
from .handlers import error_response
from .serializers import AcademicYearSerializer, SchoolListSerializer, SchoolSerializer
from .services import ProvisioningService, SetupWizardService

logger = logging.getLogger(__name__)


def _request_body(request):
    """JSON body as a dict; anything else counts as empty."""
    data = request.data
    return data if hasattr(data, 'get') else {}


def _server_error(message):
    return Response({'error': message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


# ============ SETUP WIZARD ============

class AcademicYearSetupView(APIView):
    """POST /setup/academic-year - create the school's current academic year."""

    permission_classes = [HasSchoolContext]
    error_message = 'Failed to create academic year'

    def post(self, request):
        try:
            academic_year = SetupWizardService.record_academic_year(
                request.user.school_id, _request_body(request)
            )
        except SchoolManagementException as e:
            return error_response(e, self.error_message)
        except Exception as e:
            logger.error(f"Error creating academic year: {e}", exc_info=True)
            return _server_error(self.error_message)

        return Response({
            'success': True,
            'academicYear': AcademicYearSerializer(academic_year).data,
        })


class SchoolProfileSetupView(APIView):
    """POST /setup/school-profile - address, phone and principal."""

    permission_classes = [HasSchoolContext]
    error_message = 'Failed to update school profile'

    def post(self, request):
        try:
            school = SetupWizardService.complete_school_profile(
                request.user.school_id, _request_body(request)
            )
        except SchoolManagementException as e:
            return error_response(e, self.error_message)
        except Exception as e:
            logger.error(f"Error updating school profile: {e}", exc_info=True)
            return _server_error(self.error_message)

        return Response({
            'success': True,
            'school': SchoolSerializer(school).data,
        })


# ============ PROVISIONING ============

class ProvisioningSchoolsView(APIView):
    """
    GET  /provisioning/schools - every school with plan and headcounts
    POST /provisioning/schools - create a school and its first admin
    """

    permission_classes = [IsSuperAdmin]
    error_message = 'Failed to create school'

    def get(self, request):
        try:
            schools = ProvisioningService.list_schools()
        except SchoolManagementException as e:
            return error_response(e, 'Failed to fetch schools')
        except Exception as e:
            logger.error(f"Error fetching schools: {e}", exc_info=True)
            return _server_error('Failed to fetch schools')

        return Response({'schools': SchoolListSerializer(schools, many=True).data})

    def post(self, request):
        try:
            school, credentials = ProvisioningService.provision_school(_request_body(request))
        except SchoolManagementException as e:
            return error_response(e, self.error_message)
        except Exception as e:
            logger.error(f"Error creating school: {e}", exc_info=True)
            return _server_error(self.error_message)

        return Response({
            'success': True,
            'school': SchoolSerializer(school).data,
            'credentials': credentials,
        })
