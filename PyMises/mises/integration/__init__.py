# 文件: PyMises/mises/integration/__init__.py
"""
积分点层

- PointStore: 以 (element_id, ip_index) 为键的积分点状态容器
- StrainPathDriver: 应变路径驱动的材料点求解器
"""

from .point_store import PointStore
from .driver import StrainPathDriver, StepRecord, DEFAULT_CONFIG

__all__ = ['PointStore', 'StrainPathDriver', 'StepRecord', 'DEFAULT_CONFIG']
