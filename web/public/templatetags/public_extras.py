# FILE: web/public/templatetags/public_extras.py
# DATE: 2026-10-12
# Add: {% image_with_fallback image "css-class" %} — <img> that swaps to its fallback once on load error.

from django import template

register = template.Library()


@register.inclusion_tag("public/_image.html")
def image_with_fallback(image, css_class=""):
    return {"image": image, "css_class": css_class}
