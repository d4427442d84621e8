# 文件: PyMises/mises/materials/errors.py
"""
材料系统异常定义

所有本构计算中的错误都在积分点局部被检测，并同步抛给调用方 (离散层)。
不允许吞掉异常或返回零应力。

层次结构:
    MaterialError
    ├── UnsupportedMaterialModeError   材料模式不受支持 (不可恢复)
    ├── LocalConvergenceError          局部返回映射 Newton 迭代未收敛 (可减小步长重试)
    ├── MaterialConfigurationError     参数/能力配置错误 (不重试)
    ├── InvalidDeformationError        变形梯度非法 (det F <= 0)
    └── TrialStateError                试探状态句柄使用错误
"""


class MaterialError(Exception):
    """
    材料计算错误基类

    Attributes:
        point_key: 出错积分点的标识 (element_id, ip_index)，由积分点容器填写
    """

    def __init__(self, message: str, point_key=None):
        super().__init__(message)
        self.point_key = point_key

    def __str__(self) -> str:
        message = super().__str__()
        if self.point_key is not None:
            return f"{message} (point {self.point_key})"
        return message


class UnsupportedMaterialModeError(MaterialError, ValueError):
    """材料模式 (如平面应力) 不被当前本构模型支持"""


class MaterialConfigurationError(MaterialError, ValueError):
    """材料参数非法、缺失，或缺少所需的能力"""


class InvalidDeformationError(MaterialError, ValueError):
    """变形梯度的雅可比行列式非正"""


class TrialStateError(MaterialError, RuntimeError):
    """对已提交/已丢弃的试探句柄进行了操作"""


class LocalConvergenceError(MaterialError):
    """
    局部返回映射未收敛

    调用方应保持该积分点的临时状态不变，并以更小的载荷增量重试。

    Attributes:
        result: ConvergenceResult (converged, iterations, residual)
    """

    def __init__(self, result, point_key=None):
        self.result = result
        super().__init__(
            f"Local return mapping did not converge after {result.iterations} "
            f"iterations (|g| = {result.residual:.3e})",
            point_key=point_key,
        )
