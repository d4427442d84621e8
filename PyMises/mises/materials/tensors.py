# 文件: PyMises/mises/materials/tensors.py
"""
张量代数工具

约化向量约定 (与 MaterialMode 对应):
- 应变: 工程剪应变 (剪切分量为张量分量的 2 倍)
- 应力: 张量分量 (剪切分量不加倍)
两种约定在同一次计算中不能混用。

四阶张量以 (3,3,3,3) 数组表示，A[i,j,k,l] = ∂X_ij/∂Y_kl，
通过少量可组合的运算 (并矢积、投影、乘积求导) 构造，避免逐项展开的矩阵。
"""

import numpy as np
import scipy.linalg as sl

from .interfaces import MaterialMode
from .errors import UnsupportedMaterialModeError


# 约化向量中各分量对应的 (i, j) 下标
_SYM_INDICES = {
    MaterialMode.ONE_D: [(0, 0)],
    MaterialMode.PLANE_STRAIN: [(0, 0), (1, 1), (2, 2), (0, 1)],
    MaterialMode.PLANE_STRESS: [(0, 0), (1, 1), (0, 1)],
    MaterialMode.THREE_D: [(0, 0), (1, 1), (2, 2), (1, 2), (0, 2), (0, 1)],
}


# 变形梯度 (非对称) 约化向量的 (i, j) 下标
_F_INDICES = {
    MaterialMode.PLANE_STRAIN: [(0, 0), (1, 1), (2, 2), (0, 1), (1, 0)],
    MaterialMode.THREE_D: [
        (0, 0), (1, 1), (2, 2), (1, 2), (0, 2), (0, 1), (2, 1), (2, 0), (1, 0)
    ],
}


def _sym_indices(mode: MaterialMode):
    return _SYM_INDICES[mode]


def _f_indices(mode: MaterialMode):
    try:
        return _F_INDICES[mode]
    except KeyError:
        raise UnsupportedMaterialModeError(
            f"Deformation gradient vector is not defined for mode '{mode.value}'"
        ) from None


def normal_count(mode: MaterialMode) -> int:
    """约化向量中正应力/正应变分量的个数"""
    return sum(1 for i, j in _sym_indices(mode) if i == j)


def shear_weights(mode: MaterialMode) -> np.ndarray:
    """剪切分量权重: 正分量为 1，剪切分量为 2 (用于范数与双点积)"""
    return np.array([1.0 if i == j else 2.0 for i, j in _sym_indices(mode)])


# =============================================================================
# 约化向量 <-> 3x3 张量
# =============================================================================

def reduced_to_tensor(v: np.ndarray, mode: MaterialMode, engineering: bool = False) -> np.ndarray:
    """
    约化对称向量 -> 3x3 张量

    Args:
        v: 约化向量
        mode: 材料模式
        engineering: True 表示输入剪切分量为工程形式 (应变)
    """
    factor = 0.5 if engineering else 1.0
    T = np.zeros((3, 3))
    for value, (i, j) in zip(v, _sym_indices(mode)):
        if i == j:
            T[i, i] = value
        else:
            T[i, j] = T[j, i] = factor * value
    return T


def tensor_to_reduced(T: np.ndarray, mode: MaterialMode, engineering: bool = False) -> np.ndarray:
    """
    3x3 对称张量 -> 约化向量

    Args:
        T: 对称张量 (3,3)
        mode: 材料模式
        engineering: True 返回工程形式 (剪切分量乘 2)
    """
    factor = 2.0 if engineering else 1.0
    return np.array([
        T[i, j] if i == j else factor * T[i, j] for i, j in _sym_indices(mode)
    ])


def full_form(v: np.ndarray, mode: MaterialMode, engineering: bool = False) -> np.ndarray:
    """约化向量 -> 完整 6 分量向量 [xx, yy, zz, yz, xz, xy]"""
    return tensor_to_reduced(
        reduced_to_tensor(v, mode, engineering), MaterialMode.THREE_D, engineering
    )


def vector_to_deformation_gradient(vF: np.ndarray, mode: MaterialMode) -> np.ndarray:
    """变形梯度约化向量 -> 3x3 矩阵 (未给出的分量取单位阵)"""
    F = np.eye(3)
    for value, (i, j) in zip(vF, _f_indices(mode)):
        F[i, j] = value
    return F


def gradient_size(mode: MaterialMode) -> int:
    """变形梯度约化向量的分量个数"""
    return len(_f_indices(mode))


def deformation_gradient_to_vector(F: np.ndarray, mode: MaterialMode) -> np.ndarray:
    """3x3 非对称张量 (F 或 P) -> 约化向量"""
    return np.array([F[i, j] for i, j in _f_indices(mode)])


# =============================================================================
# 约化形式的算子
# =============================================================================

def delta_vector(mode: MaterialMode) -> np.ndarray:
    """单位张量的约化形式 δ (用于迹运算)"""
    return np.array([1.0 if i == j else 0.0 for i, j in _sym_indices(mode)])


def deviatoric_projector(mode: MaterialMode) -> np.ndarray:
    """
    偏量投影矩阵与逆缩放矩阵的乘积 (P⁻¹·I_dev)

    作用于工程应变给出偏应变的张量形式，剪切对角项为 1/2:

        | 2/3 -1/3 -1/3         |
        |-1/3  2/3 -1/3         |
        |-1/3 -1/3  2/3         |
        |                1/2 ...|
    """
    if mode == MaterialMode.ONE_D or mode == MaterialMode.PLANE_STRESS:
        raise UnsupportedMaterialModeError(
            f"Deviatoric projector is not defined for mode '{mode.value}'"
        )
    n_shear = mode.size - normal_count(mode)
    B = np.eye(3) - np.ones((3, 3)) / 3.0
    return sl.block_diag(B, 0.5 * np.eye(n_shear))


def trace(v: np.ndarray, mode: MaterialMode) -> float:
    """约化向量的迹"""
    return float(delta_vector(mode) @ v)


def deviatoric_volumetric_split(strain: np.ndarray, mode: MaterialMode):
    """
    应变的偏量/体积分解

    Returns:
        dev: 偏应变 (工程形式)
        vol: 体积应变 tr(ε)/3
    """
    vol = trace(strain, mode) / 3.0
    dev = strain - vol * delta_vector(mode)
    return dev, vol


def deviatoric_volumetric_sum(stress_dev: np.ndarray, stress_vol: float, mode: MaterialMode) -> np.ndarray:
    """偏应力 + 平均应力 -> 总应力"""
    return stress_dev + stress_vol * delta_vector(mode)


def apply_deviatoric_stiffness(strain_dev: np.ndarray, G: float, mode: MaterialMode) -> np.ndarray:
    """s = 2G·e (工程剪应变先折半)"""
    return 2.0 * G * strain_dev / shear_weights(mode)


def stress_norm(stress: np.ndarray, mode: MaterialMode) -> float:
    """应力约化向量的 Frobenius 范数 ‖s‖ = √(s:s)"""
    return float(np.sqrt(np.sum(shear_weights(mode) * stress**2)))


# =============================================================================
# 四阶张量运算
# =============================================================================

I2 = np.eye(3)


def dyad4(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """并矢积 (A ⊗ B)_ijkl = A_ij B_kl"""
    return np.einsum("ij,kl->ijkl", A, B)


def identity4() -> np.ndarray:
    """四阶单位张量 δ_ik δ_jl"""
    return np.einsum("ik,jl->ijkl", I2, I2)


def sym_identity4() -> np.ndarray:
    """对称四阶单位张量 ½(δ_ik δ_jl + δ_il δ_jk)"""
    return 0.5 * (identity4() + np.einsum("il,jk->ijkl", I2, I2))


def dev_projector4() -> np.ndarray:
    """四阶偏量投影 I - (1/3) 1⊗1"""
    return identity4() - dyad4(I2, I2) / 3.0


def contract4(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """四阶张量双点积 (A : B)_ijkl = A_ijab B_abkl"""
    return np.einsum("ijab,abkl->ijkl", A, B)


def right_product_derivative(B: np.ndarray) -> np.ndarray:
    """∂(X·B)/∂X"""
    return np.einsum("ik,lj->ijkl", I2, B)


def congruence_derivative(X: np.ndarray, A: np.ndarray) -> np.ndarray:
    """∂(X·A·Xᵀ)/∂X"""
    return (
        np.einsum("ik,lj->ijkl", I2, A @ X.T)
        + np.einsum("jk,il->ijkl", I2, X @ A)
    )


def tensor4_to_reduced(C: np.ndarray, mode: MaterialMode) -> np.ndarray:
    """
    对称四阶张量 -> 约化矩阵 (应力张量分量 / 工程应变)

    剪切列取 (C_ijkl + C_ijlk)/2，与工程剪应变 γ = 2ε 对应。
    """
    indices = _sym_indices(mode)
    n = len(indices)
    answer = np.zeros((n, n))
    for a, (i, j) in enumerate(indices):
        for b, (k, l) in enumerate(indices):
            answer[a, b] = 0.5 * (C[i, j, k, l] + C[i, j, l, k])
    return answer


def tensor4_to_gradient_matrix(A: np.ndarray, mode: MaterialMode) -> np.ndarray:
    """非对称四阶张量 (如 ∂P/∂F) -> 约化矩阵，使用变形梯度向量的排列"""
    indices = _f_indices(mode)
    n = len(indices)
    answer = np.zeros((n, n))
    for a, (i, j) in enumerate(indices):
        for b, (k, l) in enumerate(indices):
            answer[a, b] = A[i, j, k, l]
    return answer
