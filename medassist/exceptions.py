"""
统一异常体系。

所有业务异常继承 BaseAppException，包含：
- type:        错误类型标识（validation_error / block / provider_error / ...）
- code:        业务错误码（EMPTY_CART / PROVIDER_NOT_CONFIGURED / ...）
- message:     人类可读的描述
- detail:      可选的附加信息（dict / list / None）
- http_status: HTTP 状态码

View 层只需 raise，exception_handler 统一捕获并格式化响应。

注意：AI 返回内容格式错误（非 JSON / 缺字段）不属于异常，
由 diagnosis.parsing 的文本兜底逻辑吸收，永远不会抛到这里。
"""


class BaseAppException(Exception):
    """所有业务异常的基类。"""

    type = 'error'
    code = 'UNKNOWN_ERROR'
    http_status = 500

    def __init__(self, message, code=None, detail=None, http_status=None):
        self.message = message
        if code is not None:
            self.code = code
        if http_status is not None:
            self.http_status = http_status
        self.detail = detail
        super().__init__(message)


class ValidationError(BaseAppException):
    """输入验证失败。view 层抛出，400。"""

    type = 'validation_error'
    code = 'VALIDATION_ERROR'
    http_status = 400


class BlockError(BaseAppException):
    """业务规则阻止操作。service 层抛出，409。"""

    type = 'block'
    code = 'BUSINESS_BLOCK'
    http_status = 409


class CheckoutBlocked(BlockError):
    """
    Checkout 状态机拒绝本次跳转。

    例如：空购物车 proceed、非 payment 状态下付款、付款请求已在处理中。
    """

    code = 'INVALID_CHECKOUT_STEP'


class ProviderNotConfigured(BaseAppException):
    """
    选中的 AI 供应商没有可用的 API key。

    与 ProviderCallFailed 区分开：前端据此展示"去设置页配置 key"，
    而不是"稍后重试"。不重试。
    """

    type = 'provider_not_configured'
    code = 'PROVIDER_NOT_CONFIGURED'
    http_status = 503


class ProviderCallFailed(BaseAppException):
    """AI / 支付供应商调用失败（网络、HTTP 非 2xx、超时、SDK 报错）。502。"""

    type = 'provider_error'
    code = 'PROVIDER_CALL_FAILED'
    http_status = 502


class PaymentFailed(BaseAppException):
    """
    支付失败。

    抛出前 CheckoutSession 已经回到 payment 状态、购物车保留、
    payment_error 已写入，用户可以直接重试。402。
    """

    type = 'payment_failed'
    code = 'PAYMENT_FAILED'
    http_status = 402
