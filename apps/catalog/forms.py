from django import forms

from .models import Product
from .utils import product_slug


class ProductAdminForm(forms.ModelForm):
    """
    Create/edit form for products.

    The slug is never taken from the submitted data: on create it is
    derived from the name, on edit the stored slug is kept.
    """

    class Meta:
        model = Product
        fields = [
            'name', 'slug', 'description',
            'sku', 'price', 'quantity', 'type',
            'is_visible', 'is_featured', 'published_at',
            'image',
            'brand', 'categories',
        ]
        widgets = {
            'price': forms.NumberInput(attrs={'step': '0.01', 'min': '0'}),
            'quantity': forms.NumberInput(attrs={'min': '0', 'max': '100'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Absent when the admin renders a view-only page
        slug = self.fields.get('slug')
        if slug is None:
            return
        if self.is_creating:
            slug.required = False
            slug.widget.attrs['readonly'] = True
        else:
            slug.disabled = True

    @property
    def is_creating(self):
        return self.instance._state.adding

    def clean_slug(self):
        if not self.is_creating:
            return self.instance.slug

        name = self.cleaned_data.get('name')
        if not name:
            # The name error is already reported
            return ''
        slug = product_slug(name)
        if not slug:
            raise forms.ValidationError(
                'A slug could not be derived from this name.',
                code='invalid',
            )
        return slug
