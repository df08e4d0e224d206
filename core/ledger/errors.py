"""
원장 예외

요청 단위로 발생하고 재시도하지 않는다.
Web 라우트에서 HTTP 상태 코드로 변환.
"""


class LedgerError(Exception):
    """원장 예외 기본 클래스"""

    pass


class ValidationError(LedgerError):
    """입력 형식 오류 (날짜 형식, cursor 등)"""

    pass


class InvalidRange(ValidationError):
    """from > to 인 조회 범위"""

    pass


class InvalidGranularity(ValidationError):
    """day/week/month/auto 이외의 집계 단위"""

    pass


class ConstraintViolation(LedgerError):
    """금액/종류 불일치, 메모 길이 초과 등 저장소 제약 위반"""

    pass


class ForeignKeyViolation(LedgerError):
    """존재하지 않는 계정을 참조"""

    pass
