"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- transactions: 거래 추가 / 초기 잔액 / 거래 목록
- summary: 기간 집계
- meta: 가장 오래된 거래 날짜
"""
