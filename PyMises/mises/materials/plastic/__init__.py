# 文件: PyMises/mises/materials/plastic/__init__.py
"""
塑性模型组件模块

提供塑性本构的核心组件:
- 屈服函数 (yield_functions): VonMises
- 硬化规律 (hardening): IsotropicHardening, KinematicHardening
- 返回映射 (return_mapping): RadialReturn, UniaxialReturn
"""

from .yield_functions import VonMises
from .hardening import IsotropicHardening, KinematicHardening
from .return_mapping import ConvergenceResult, ReturnMappingResult, RadialReturn, UniaxialReturn

__all__ = [
    # 屈服函数
    'VonMises',

    # 硬化规律
    'IsotropicHardening',
    'KinematicHardening',

    # 返回映射
    'ConvergenceResult',
    'ReturnMappingResult',
    'RadialReturn',
    'UniaxialReturn',
]
