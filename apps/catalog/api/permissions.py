from rest_framework import permissions


class ProductModelPermissions(permissions.DjangoModelPermissions):
    """
    Model permissions of the staff API, matching what the admin allows.

    - GET, HEAD: view permission
    - POST: add, PUT/PATCH: change, DELETE: delete
    - bulk_delete action: delete permission
    """

    perms_map = {
        **permissions.DjangoModelPermissions.perms_map,
        'GET': ['%(app_label)s.view_%(model_name)s'],
        'HEAD': ['%(app_label)s.view_%(model_name)s'],
    }
    action_perms_map = {
        'bulk_delete': ['%(app_label)s.delete_%(model_name)s'],
    }

    def has_permission(self, request, view):
        required = self.action_perms_map.get(getattr(view, 'action', None))
        if required is None:
            return super().has_permission(request, view)

        if not request.user or not request.user.is_authenticated:
            return False
        opts = view.get_queryset().model._meta
        perms = [
            perm % {'app_label': opts.app_label, 'model_name': opts.model_name}
            for perm in required
        ]
        return request.user.has_perms(perms)
