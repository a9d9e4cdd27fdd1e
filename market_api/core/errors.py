"""core/errors.py – Exception dùng chung giữa core và routes."""


class NotFoundError(ValueError):
    """Không tìm thấy bản ghi (food/order) theo id."""


class UnauthorizedError(Exception):
    """Thiếu token, token sai chữ ký hoặc đã hết hạn."""


class ForbiddenError(Exception):
    """Identity hợp lệ nhưng không có quyền trên dữ liệu được yêu cầu."""
