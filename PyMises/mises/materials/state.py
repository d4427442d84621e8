# 文件: PyMises/mises/materials/state.py
"""
材料状态管理

- PlasticState: 塑性材料的状态容器，存储积分点的历史变量
- MaterialPoint: 单个积分点，持有已提交状态并管理试探状态
- TrialHandle: 试探状态句柄 (两阶段提交: begin_trial → commit / discard)
"""

from dataclasses import dataclass, field
from typing import Optional
import numpy as np

from .errors import TrialStateError
from .interfaces import MaterialMode


@dataclass
class PlasticState:
    """
    塑性材料状态容器

    存储积分点的历史变量，用于增量塑性计算。
    向量字段的长度由 mode 决定 (1/4/6)。

    Attributes:
        mode: 材料模式
        stress: 应力约化向量 (小变形: 柯西应力; 有限变形: Kirchhoff 应力)
        strain: 总应变 (工程形式) 或变形梯度约化向量
        kappa: 累积塑性应变 κ
        plastic_strain: 塑性应变约化向量 (工程形式)
        back_stress: 背应力约化向量
        left_cauchy_green: 弹性左 Cauchy-Green 张量 B_e (3x3)
        deformation_gradient: 变形梯度 F (3x3)
        trial_stress_dev: 试探相对偏应力缓存，开始试探时及提交后为 None

    Example:
        state = PlasticState(MaterialMode.THREE_D)
        # ... 材料计算 ...
        committed_state = state.copy()  # 收敛后保存
    """

    mode: MaterialMode = MaterialMode.THREE_D
    stress: Optional[np.ndarray] = None
    strain: Optional[np.ndarray] = None
    kappa: float = 0.0
    plastic_strain: Optional[np.ndarray] = None
    back_stress: Optional[np.ndarray] = None
    left_cauchy_green: np.ndarray = field(default_factory=lambda: np.eye(3))
    deformation_gradient: np.ndarray = field(default_factory=lambda: np.eye(3))
    trial_stress_dev: Optional[np.ndarray] = None

    def __post_init__(self):
        n = self.mode.size
        if self.stress is None:
            self.stress = np.zeros(n)
        if self.strain is None:
            self.strain = np.zeros(n)
        if self.plastic_strain is None:
            self.plastic_strain = np.zeros(n)
        if self.back_stress is None:
            self.back_stress = np.zeros(n)

    def copy(self) -> 'PlasticState':
        """
        深拷贝

        Returns:
            PlasticState: 独立的状态副本
        """
        return PlasticState(
            mode=self.mode,
            stress=self.stress.copy(),
            strain=self.strain.copy(),
            kappa=self.kappa,
            plastic_strain=self.plastic_strain.copy(),
            back_stress=self.back_stress.copy(),
            left_cauchy_green=self.left_cauchy_green.copy(),
            deformation_gradient=self.deformation_gradient.copy(),
            trial_stress_dev=None if self.trial_stress_dev is None else self.trial_stress_dev.copy(),
        )

    def reset(self) -> None:
        """重置为初始状态"""
        n = self.mode.size
        self.stress = np.zeros(n)
        self.strain = np.zeros(n)
        self.kappa = 0.0
        self.plastic_strain = np.zeros(n)
        self.back_stress = np.zeros(n)
        self.left_cauchy_green = np.eye(3)
        self.deformation_gradient = np.eye(3)
        self.trial_stress_dev = None

    def save_context(self) -> np.ndarray:
        """
        保存已提交的历史变量

        Returns:
            扁平记录 [plastic_strain, κ, back_stress, B_e (9), F (9)]
        """
        return np.concatenate([
            self.plastic_strain,
            [self.kappa],
            self.back_stress,
            self.left_cauchy_green.ravel(),
            self.deformation_gradient.ravel(),
        ])

    def restore_context(self, record: np.ndarray) -> None:
        """
        从 save_context 的记录恢复历史变量

        Raises:
            ValueError: 记录长度与材料模式不符
        """
        n = self.mode.size
        record = np.asarray(record, dtype=float)
        if record.shape != (2 * n + 19,):
            raise ValueError(
                f"Context record of shape {record.shape} does not match mode '{self.mode.value}'"
            )
        self.plastic_strain = record[:n].copy()
        self.kappa = float(record[n])
        self.back_stress = record[n + 1:2 * n + 1].copy()
        self.left_cauchy_green = record[2 * n + 1:2 * n + 10].reshape(3, 3).copy()
        self.deformation_gradient = record[2 * n + 10:].reshape(3, 3).copy()
        self.trial_stress_dev = None

    def __repr__(self) -> str:
        return (
            f"PlasticState(mode={self.mode.value}, kappa={self.kappa:.6f}, "
            f"stress_max={np.max(np.abs(self.stress)):.2e})"
        )


class TrialHandle:
    """
    试探状态句柄

    由 MaterialPoint.begin_trial() 创建，材料计算只写入 handle.state。
    提交或丢弃后句柄失效，再次使用抛出 TrialStateError。
    """

    def __init__(self, point: 'MaterialPoint'):
        self._point = point
        self._state = point.committed.copy()
        self._state.trial_stress_dev = None
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def state(self) -> PlasticState:
        """临时状态"""
        if not self._active:
            raise TrialStateError("Trial handle has already been committed or discarded")
        return self._state

    @property
    def committed(self) -> PlasticState:
        """对应积分点的已提交状态 (只读使用)"""
        return self._point.committed

    @property
    def mode(self) -> MaterialMode:
        return self._point.committed.mode

    def _close(self) -> None:
        self._active = False


class MaterialPoint:
    """
    积分点 (独占其状态)

    生命周期:
        handle = point.begin_trial()     # 临时状态 = 已提交状态
        material.evaluate_stress(..., handle)
        point.commit(handle)             # 或 point.discard(handle)

    再次调用 begin_trial() 会使之前的句柄失效。
    """

    def __init__(self, committed: PlasticState):
        self.committed = committed
        self._handle: Optional[TrialHandle] = None

    def begin_trial(self) -> TrialHandle:
        if self._handle is not None:
            self._handle._close()
        self._handle = TrialHandle(self)
        return self._handle

    def _check_handle(self, handle: TrialHandle) -> None:
        if handle is not self._handle or not handle.active:
            raise TrialStateError("Trial handle is not the open trial of this point")

    def commit(self, handle: TrialHandle) -> None:
        """临时状态 → 已提交状态 (新记录构造完成后一次性替换)"""
        self._check_handle(handle)
        new_committed = handle.state.copy()
        new_committed.trial_stress_dev = None
        self.committed = new_committed
        handle._close()
        self._handle = None

    def discard(self, handle: TrialHandle) -> None:
        """丢弃临时状态"""
        self._check_handle(handle)
        handle._close()
        self._handle = None

    def __repr__(self) -> str:
        return f"MaterialPoint({self.committed!r})"


def begin_trial(point: MaterialPoint) -> TrialHandle:
    return point.begin_trial()


def commit(handle: TrialHandle) -> None:
    handle._point.commit(handle)


def discard(handle: TrialHandle) -> None:
    handle._point.discard(handle)
