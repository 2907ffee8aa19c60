from sitetracker.models.labor_entry import LaborEntry
from sitetracker.models.material import Material
from sitetracker.models.material_image import MaterialImage
from sitetracker.models.task import Task

__all__ = [
    "LaborEntry",
    "Material",
    "MaterialImage",
    "Task",
]
