"""
Admin plugin management views.
"""
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.views import APIView

from apps.common.exceptions import PluginError
from apps.common.permissions import IsSchoolAdmin
from apps.common.utils import success_response, error_response
from ..manager import get_plugin_manager
from ..models import Plugin
from ..serializers import PluginSerializer, PluginInstallSerializer


class PluginListView(APIView):
    """GET /api/admin/plugins/ - Installed plugins plus configured ones"""
    permission_classes = [IsSchoolAdmin]

    def get(self, request):
        manager = get_plugin_manager()
        return success_response({
            'installed': PluginSerializer(
                Plugin.objects.prefetch_related('permissions'), many=True
            ).data,
            'available': manager.get_available_plugins(),
        })


class PluginInstallView(APIView):
    """POST /api/admin/plugins/install/"""
    permission_classes = [IsSchoolAdmin]

    def post(self, request):
        serializer = PluginInstallSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid plugin', serializer.errors)

        try:
            record = get_plugin_manager().install_plugin(serializer.validated_data['slug'])
        except PluginError as e:
            return error_response(str(e))

        return success_response(PluginSerializer(record).data, 'Plugin installed', status.HTTP_201_CREATED)


class PluginEnableView(APIView):
    """POST /api/admin/plugins/{id}/enable/"""
    permission_classes = [IsSchoolAdmin]

    def post(self, request, pk):
        record = get_object_or_404(Plugin, pk=pk)
        if record.is_enabled:
            return error_response('Plugin is already enabled')

        try:
            get_plugin_manager().enable_plugin(record)
        except PluginError as e:
            return error_response(str(e))

        return success_response(PluginSerializer(record).data, 'Plugin enabled')


class PluginDisableView(APIView):
    """POST /api/admin/plugins/{id}/disable/"""
    permission_classes = [IsSchoolAdmin]

    def post(self, request, pk):
        record = get_object_or_404(Plugin, pk=pk)
        if not record.is_enabled:
            return error_response('Plugin is not enabled')

        get_plugin_manager().disable_plugin(record)
        return success_response(PluginSerializer(record).data, 'Plugin disabled')


class PluginDetailView(APIView):
    """GET / DELETE /api/admin/plugins/{id}/"""
    permission_classes = [IsSchoolAdmin]

    def get(self, request, pk):
        record = get_object_or_404(Plugin, pk=pk)
        return success_response(PluginSerializer(record).data)

    def delete(self, request, pk):
        record = get_object_or_404(Plugin, pk=pk)
        get_plugin_manager().uninstall_plugin(record)
        return success_response(None, 'Plugin uninstalled')
