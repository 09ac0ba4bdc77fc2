from volleycoach.templates.catalog import TRAINING_TEMPLATES, get_template, list_templates

__all__ = ["TRAINING_TEMPLATES", "get_template", "list_templates"]
