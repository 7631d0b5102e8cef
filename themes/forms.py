from django import forms

from .colors import COLOR_FIELDS, COLOR_LABELS, ColorConfig, is_css_color
from .models import Theme, ThemeCss, ThemeWidget


class ThemeForm(forms.ModelForm):
    class Meta:
        model = Theme
        fields = [
            "name",
            "slug",
            "description",
            "price",
            "thumbnail_url",
            "status",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3, "class": "form-control"}),
        }


class ThemeColorsForm(forms.Form):
    """One input per color slot, prefilled from the merged configuration."""

    def __init__(self, *args, colors=None, **kwargs):
        colors = colors or ColorConfig()
        kwargs["initial"] = {**colors.as_dict(), **(kwargs.get("initial") or {})}
        super().__init__(*args, **kwargs)
        for name in COLOR_FIELDS:
            self.fields[name] = forms.CharField(
                label=COLOR_LABELS.get(name, name),
                max_length=64,
                widget=forms.TextInput(attrs={"type": "color", "class": "form-control-color"}),
            )

    def clean(self):
        cleaned = super().clean()
        for name in COLOR_FIELDS:
            value = cleaned.get(name)
            if value and not is_css_color(value):
                self.add_error(name, "Enter a valid CSS color (e.g. #e94560).")
        return cleaned

    def to_colors(self):
        return ColorConfig.from_mapping(self.cleaned_data)


class PageCssForm(forms.Form):
    page_type = forms.ChoiceField(choices=ThemeCss.PageType.choices)
    css_code = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"rows": 20, "class": "form-control font-monospace"}),
    )


class ThemeWidgetForm(forms.ModelForm):
    class Meta:
        model = ThemeWidget
        fields = [
            "name",
            "widget_type",
            "html_content",
            "config",
            "display_order",
            "is_active",
        ]
        widgets = {
            "html_content": forms.Textarea(attrs={"rows": 8, "class": "form-control font-monospace"}),
            "config": forms.Textarea(attrs={"rows": 2, "class": "form-control"}),
        }

    def clean_config(self):
        config = self.cleaned_data.get("config")
        if config in (None, ""):
            return {}
        if not isinstance(config, dict):
            raise forms.ValidationError("Config must be a JSON object.")
        return config
