# 文件: PyMises/mises/materials/elastic/__init__.py
"""
弹性模型模块

提供弹性响应模型:
- IsotropicElastic: 各向同性线弹性 (G, K 参数化)
"""

from .isotropic import IsotropicElastic

__all__ = ['IsotropicElastic']
