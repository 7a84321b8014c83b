'''warm-fs 명령행 패키지(KR). warm-fs command line package (EN).'''
