import os

# 차트 테스트는 화면 없이 실행
os.environ.setdefault("MPLBACKEND", "Agg")
