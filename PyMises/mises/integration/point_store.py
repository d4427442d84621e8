# 文件: PyMises/mises/integration/point_store.py
"""
积分点状态容器

以 (element_id, ip_index) 为稳定键保存每个积分点的 MaterialPoint，
所有积分点共享同一个材料对象 (材料对象无状态，只读)。

不同积分点之间互不共享状态，evaluate_all 可在线程池中并行计算；
单个积分点内部的计算始终顺序进行。
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Hashable, Iterable, Optional, Tuple

import numpy as np

from ..materials.errors import MaterialError
from ..materials.interfaces import Material, MaterialMode, TangentMode
from ..materials.state import MaterialPoint, TrialHandle

LOG = logging.getLogger(__name__)

PointKey = Tuple[Hashable, int]


class PointStore:
    """
    积分点状态容器 (arena)

    Example:
        store = PointStore(material, MaterialMode.THREE_D)
        store.add_element(element_id=1, n_points=8)
        handles = store.begin_trial_all()
        results = store.evaluate_all({key: strain for key in store}, handles)
        store.commit_all(handles)
    """

    def __init__(self, material: Material, mode: MaterialMode):
        material.check_mode(mode)
        self.material = material
        self.mode = mode
        self._points: Dict[PointKey, MaterialPoint] = {}

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __contains__(self, key) -> bool:
        return key in self._points

    def keys(self):
        return list(self._points)

    def add_point(self, element_id: Hashable, ip: int) -> MaterialPoint:
        """添加一个积分点 (初始状态)"""
        key = (element_id, ip)
        if key in self._points:
            raise KeyError(f"Integration point {key} already exists")
        point = MaterialPoint(self.material.create_state(self.mode))
        self._points[key] = point
        return point

    def add_element(self, element_id: Hashable, n_points: int) -> None:
        """为一个单元添加 n_points 个积分点"""
        for ip in range(n_points):
            self.add_point(element_id, ip)

    def point(self, key: PointKey) -> MaterialPoint:
        return self._points[key]

    def committed(self, key: PointKey):
        """已提交状态"""
        return self._points[key].committed

    def begin_trial(self, key: PointKey) -> TrialHandle:
        return self._points[key].begin_trial()

    def begin_trial_all(self) -> Dict[PointKey, TrialHandle]:
        return {key: point.begin_trial() for key, point in self._points.items()}

    def evaluate(
        self,
        key: PointKey,
        gradient: np.ndarray,
        handle: TrialHandle,
        tangent_mode: Optional[TangentMode] = None
    ) -> Tuple[np.ndarray, Optional[np.ndarray]]:
        """
        计算一个积分点的应力 (及切线)

        Returns:
            stress: 应力约化向量
            tangent: 切线矩阵 (tangent_mode 为 None 时为 None)

        Raises:
            MaterialError: 附带 point_key 后重新抛出
        """
        try:
            stress = self.material.evaluate_stress(gradient, handle)
            tangent = None
            if tangent_mode is not None:
                tangent = self.material.evaluate_tangent(tangent_mode, handle)
        except MaterialError as err:
            err.point_key = key
            raise
        return stress, tangent

    def evaluate_all(
        self,
        gradients: Dict[PointKey, np.ndarray],
        handles: Dict[PointKey, TrialHandle],
        tangent_mode: Optional[TangentMode] = None,
        max_workers: Optional[int] = None
    ) -> Dict[PointKey, Tuple[np.ndarray, Optional[np.ndarray]]]:
        """
        计算多个积分点

        Args:
            gradients: {key: 应变或变形梯度向量}
            handles: {key: 试探句柄}
            tangent_mode: 同时计算的切线类型 (None 表示不计算)
            max_workers: 线程数；None 或 1 表示顺序计算

        Returns:
            {key: (stress, tangent)}
        """
        keys = list(gradients)
        if max_workers is None or max_workers <= 1:
            return {
                key: self.evaluate(key, gradients[key], handles[key], tangent_mode)
                for key in keys
            }

        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = {
                key: pool.submit(self.evaluate, key, gradients[key], handles[key], tangent_mode)
                for key in keys
            }
            return {key: future.result() for key, future in futures.items()}

    def commit_all(self, handles: Dict[PointKey, TrialHandle]) -> None:
        for key, handle in handles.items():
            self._points[key].commit(handle)
        LOG.debug("Committed %d integration points", len(handles))

    def discard_all(self, handles: Dict[PointKey, TrialHandle]) -> None:
        for key, handle in handles.items():
            self._points[key].discard(handle)

    def save_context(self, keys: Optional[Iterable[PointKey]] = None) -> Dict[PointKey, np.ndarray]:
        """保存 (部分) 积分点的已提交历史变量"""
        keys = self._points if keys is None else keys
        return {key: self._points[key].committed.save_context() for key in keys}

    def restore_context(self, context: Dict[PointKey, np.ndarray]) -> None:
        for key, record in context.items():
            self._points[key].committed.restore_context(record)

    def __repr__(self) -> str:
        return f"PointStore(material={self.material!r}, mode={self.mode.value}, points={len(self)})"
