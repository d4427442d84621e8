# 文件: PyMises/mises/materials/models/__init__.py
"""
预置材料模型

提供组装好的、可直接使用的材料模型:
- MisesMaterial: 小变形 J2 弹塑性材料
- FiniteStrainMisesMaterial: 有限变形 J2 弹塑性材料
"""

from .j2_plasticity import MisesMaterial
from .finite_strain import FiniteStrainMisesMaterial

__all__ = ['MisesMaterial', 'FiniteStrainMisesMaterial']
