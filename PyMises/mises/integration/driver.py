# 文件: PyMises/mises/integration/driver.py
"""
应变路径驱动器

对单个积分点施加给定的应变 (或变形梯度) 路径:
1. 从已提交的梯度线性插值到目标值，分 n_steps 个增量
2. 每个增量: begin_trial → evaluate_stress / evaluate_tangent → commit
3. 局部返回映射不收敛时丢弃试探状态，增量减半后重试 (cutback)
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import numpy as np

from ..materials.errors import LocalConvergenceError, MaterialConfigurationError
from ..materials.interfaces import Material, TangentMode
from ..materials.state import MaterialPoint

LOG = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "n_steps": 10,          # 每段路径的初始增量数
    "max_cutbacks": 10,     # 每段路径允许的最大减半次数
    "min_fraction": 1e-6,   # 最小增量 (占整段路径的比例)
    "tangent": TangentMode.TANGENT,
}


@dataclass
class StepRecord:
    """一个已提交增量的结果"""
    gradient: np.ndarray
    stress: np.ndarray
    tangent: Optional[np.ndarray]
    kappa: float
    fraction: float


class StrainPathDriver:
    """
    应变驱动的材料点求解器

    特性：
    1. 分段线性加载路径
    2. 自动增量控制 (不收敛时减半，顺利时放大)
    3. 每个收敛增量后提交积分点状态

    Example:
        driver = StrainPathDriver(material, {"n_steps": 20})
        point = MaterialPoint(material.create_state(MaterialMode.THREE_D))
        history = driver.run(point, [strain_1, strain_2])
    """

    def __init__(self, material: Material, config: Optional[Dict[str, Any]] = None):
        """
        Args:
            material: 材料对象
            config: 配置字典 (n_steps, max_cutbacks, min_fraction, tangent)
        """
        self.material = material
        self.config = dict(DEFAULT_CONFIG)
        if config:
            unknown = set(config) - set(DEFAULT_CONFIG)
            if unknown:
                raise MaterialConfigurationError(f"Unknown driver settings: {sorted(unknown)}")
            self.config.update(config)
        if int(self.config["n_steps"]) < 1:
            raise MaterialConfigurationError(f"n_steps must be at least 1, got {self.config['n_steps']}")

    def advance(self, point: MaterialPoint, target: np.ndarray) -> List[StepRecord]:
        """
        将积分点从已提交状态加载到目标梯度

        Raises:
            LocalConvergenceError: 减半次数或最小增量耗尽后仍不收敛
        """
        n_steps = int(self.config["n_steps"])
        max_cutbacks = int(self.config["max_cutbacks"])
        min_fraction = float(self.config["min_fraction"])
        tangent_mode = self.config["tangent"]

        start = self.material.committed_gradient(point.committed)
        target = np.asarray(target, dtype=float)
        base = 1.0 / n_steps
        step = base
        fraction = 0.0
        cutbacks = 0
        records = []

        while fraction < 1.0 - 1e-12:
            step = min(step, 1.0 - fraction)
            gradient = start + (fraction + step) * (target - start)

            handle = point.begin_trial()
            try:
                stress = self.material.evaluate_stress(gradient, handle)
                tangent = None
                if tangent_mode is not None:
                    tangent = self.material.evaluate_tangent(tangent_mode, handle)
            except LocalConvergenceError:
                point.discard(handle)
                cutbacks += 1
                step *= 0.5
                if cutbacks > max_cutbacks or step < min_fraction:
                    LOG.error("Step too small, aborting at fraction %.4e", fraction)
                    raise
                LOG.warning("Cutback: increment = %.4e (fraction %.4e)", step, fraction)
                continue

            kappa = handle.state.kappa
            point.commit(handle)
            fraction += step
            records.append(StepRecord(gradient, stress, tangent, kappa, fraction))
            LOG.info("Increment %d committed: fraction = %.4f, kappa = %.6e", len(records), fraction, kappa)

            step = min(step * 1.5, base)

        return records

    def run(self, point: MaterialPoint, targets: Iterable[np.ndarray]) -> List[StepRecord]:
        """依次加载到每个目标梯度，返回全部增量记录"""
        history = []
        for target in targets:
            history.extend(self.advance(point, target))
        return history
