import logging

from django.conf import settings
from django.contrib import admin, messages
from django.http import HttpResponseRedirect
from django.urls import path, reverse
from django.utils.html import format_html
from adminsortable2.admin import SortableAdminMixin
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget, ManyToManyWidget
from simple_history.admin import SimpleHistoryAdmin

from .exceptions import ProductWriteError, guard_product_write
from .forms import ProductAdminForm
from .models import Brand, Category, Product

logger = logging.getLogger(__name__)


# =============================================================================
# Import/Export Resources
# =============================================================================

class ProductResource(resources.ModelResource):
    """Resource for importing/exporting products, keyed by SKU."""

    slug = fields.Field(
        column_name='slug',
        attribute='slug',
        readonly=True
    )
    brand = fields.Field(
        column_name='brand',
        attribute='brand',
        widget=ForeignKeyWidget(Brand, 'name')
    )
    categories = fields.Field(
        column_name='categories',
        attribute='categories',
        widget=ManyToManyWidget(Category, field='name', separator=',')
    )

    class Meta:
        model = Product
        import_id_fields = ['sku']
        skip_unchanged = True
        fields = (
            'sku', 'name', 'slug', 'description', 'brand', 'categories',
            'price', 'quantity', 'type', 'is_visible', 'is_featured',
            'published_at'
        )
        export_order = fields


# =============================================================================
# List Filters
# =============================================================================

class VisibilityFilter(admin.SimpleListFilter):
    """Three-state filter: all, only visible, only hidden."""
    title = 'Visibility'
    parameter_name = 'is_visible'

    def lookups(self, request, model_admin):
        return [
            ('1', 'Only Visible Products'),
            ('0', 'Only Hidden Products'),
        ]

    def queryset(self, request, queryset):
        if self.value() == '1':
            return queryset.filter(is_visible=True)
        if self.value() == '0':
            return queryset.filter(is_visible=False)
        return queryset


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Product)
class ProductAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = ProductResource
    form = ProductAdminForm

    # Navigation & global search
    navigation_label = 'Products'
    navigation_sort = 0
    record_title_attribute = 'name'
    globally_searchable_attributes = ['name', 'slug', 'description', 'brand.name']

    # Pages: name -> (route, view method)
    pages = {
        'index': ('', 'changelist_view'),
        'create': ('create/', 'add_view'),
        'edit': ('<path:object_id>/edit/', 'change_view'),
        'view': ('<path:object_id>/view/', 'detail_view'),
    }

    # Table
    list_display = [
        'image_preview', 'name', 'brand_name', 'visibility', 'price',
        'quantity', 'published_at', 'type', 'row_actions'
    ]
    list_display_links = ['name']
    list_select_related = ['brand']
    list_filter = [VisibilityFilter, ('brand', admin.RelatedOnlyFieldListFilter)]
    search_fields = ['name', 'brand__name', 'price', 'quantity']
    list_per_page = settings.PRODUCT_ADMIN_PER_PAGE

    # Form
    prepopulated_fields = {'slug': ('name',)}
    autocomplete_fields = ['brand', 'categories']
    fieldsets = (
        (None, {
            'fields': (('name', 'slug'), 'description')
        }),
        ('Pricing & Inventory', {
            'fields': (('sku', 'price'), ('quantity', 'type'))
        }),
        ('Status', {
            'fields': ('is_visible', 'is_featured', 'published_at')
        }),
        ('Image', {
            'fields': ('image',),
            'classes': ('collapse',)
        }),
        ('Associations', {
            'fields': ('brand', 'categories')
        }),
    )

    # -------------------------------------------------------------------------
    # Navigation & global search
    # -------------------------------------------------------------------------

    def get_navigation_badge(self, request):
        return str(self.model.objects.count())

    def get_global_search_result_details(self, obj):
        return {
            'Brand': obj.brand.name,
            'Price': obj.price,
            'Quantity': obj.quantity,
        }

    def get_global_search_result_url(self, obj):
        return self.page_url('edit', obj)

    # -------------------------------------------------------------------------
    # Pages
    # -------------------------------------------------------------------------

    def get_urls(self):
        info = self.opts.app_label, self.opts.model_name
        page_urls = [
            path(
                route,
                self.admin_site.admin_view(getattr(self, view_name)),
                name='%s_%s_%s' % (info + (page,))
            )
            for page, (route, view_name) in self.pages.items()
        ]
        return page_urls + super().get_urls()

    def page_url(self, page, obj=None):
        info = self.opts.app_label, self.opts.model_name
        args = (obj.pk,) if obj is not None else ()
        return reverse(
            '%s:%s_%s_%s' % ((self.admin_site.name,) + info + (page,)),
            args=args
        )

    def detail_view(self, request, object_id, extra_context=None):
        """Read-only rendering of the change form."""
        request.catalog_read_only = True
        return self.change_view(request, object_id, extra_context=extra_context)

    def has_change_permission(self, request, obj=None):
        if getattr(request, 'catalog_read_only', False):
            return False
        return super().has_change_permission(request, obj)

    def get_prepopulated_fields(self, request, obj=None):
        # Slug follows the name only while creating
        if obj is not None:
            return {}
        return super().get_prepopulated_fields(request, obj)

    # -------------------------------------------------------------------------
    # Columns
    # -------------------------------------------------------------------------

    @admin.display(description='Image')
    def image_preview(self, obj):
        url = obj.image_url
        if not url:
            return '-'
        try:
            thumbnail_url = obj.thumbnail.url
        except (OSError, ValueError):
            # Thumbnail could not be generated, show the original
            thumbnail_url = url
        return format_html(
            '<a href="{}"><img src="{}" style="max-height: 40px; max-width: 60px;" /></a>',
            url, thumbnail_url
        )

    @admin.display(description='Brand', ordering='brand__name')
    def brand_name(self, obj):
        return obj.brand.name

    @admin.display(description='Visibility', boolean=True, ordering='is_visible')
    def visibility(self, obj):
        return obj.is_visible

    @admin.display(description='Actions')
    def row_actions(self, obj):
        return format_html(
            '<a href="{}">View</a> | <a href="{}">Edit</a> | <a href="{}">Delete</a>',
            self.page_url('view', obj),
            self.page_url('edit', obj),
            reverse(
                '%s:%s_%s_delete' % (self.admin_site.name, self.opts.app_label, self.opts.model_name),
                args=(obj.pk,)
            ),
        )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def save_model(self, request, obj, form, change):
        with guard_product_write('save', obj):
            super().save_model(request, obj, form, change)

    def save_related(self, request, form, formsets, change):
        with guard_product_write('save', form.instance):
            super().save_related(request, form, formsets, change)

    def delete_model(self, request, obj):
        with guard_product_write('delete', obj):
            super().delete_model(request, obj)

    def delete_queryset(self, request, queryset):
        count = queryset.count()
        with guard_product_write('delete'):
            super().delete_queryset(request, queryset)
        logger.info('Bulk deleted %d products', count)

    def changeform_view(self, request, object_id=None, form_url='', extra_context=None):
        try:
            return super().changeform_view(request, object_id, form_url, extra_context)
        except ProductWriteError as exc:
            self.message_user(request, str(exc), messages.ERROR)
            return HttpResponseRedirect(request.get_full_path())

    def delete_view(self, request, object_id, extra_context=None):
        try:
            return super().delete_view(request, object_id, extra_context)
        except ProductWriteError as exc:
            self.message_user(request, str(exc), messages.ERROR)
            return HttpResponseRedirect(request.get_full_path())

    def changelist_view(self, request, extra_context=None):
        try:
            return super().changelist_view(request, extra_context)
        except ProductWriteError as exc:
            self.message_user(request, str(exc), messages.ERROR)
            return HttpResponseRedirect(request.get_full_path())


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    navigation_sort = 1
    list_display = ['name', 'slug', 'product_count', 'is_visible', 'updated_at']
    list_filter = ['is_visible']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}

    @admin.display(description='Products')
    def product_count(self, obj):
        return obj.products.count()


@admin.register(Category)
class CategoryAdmin(SortableAdminMixin, admin.ModelAdmin):
    navigation_sort = 2
    list_display = ['name', 'slug', 'parent', 'product_count', 'is_visible', 'display_order']
    list_filter = ['is_visible']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}
    autocomplete_fields = ['parent']

    @admin.display(description='Products')
    def product_count(self, obj):
        return obj.products.count()
