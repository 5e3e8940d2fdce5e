"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- me: 호출자 정보
- accounts: 계좌 생성/조회
- deposits: 입금
- transactions: 거래 내역
"""
