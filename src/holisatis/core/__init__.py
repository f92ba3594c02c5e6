# src/holisatis/core/__init__.py
"""
Núcleo sem estado do holisatis.

Componentes:
    - errors   → hierarquia de exceções do pacote
    - hashing  → identidade de repositórios e hash canônico de documentos
    - merge    → deep-merge determinístico
    - defaults → valores padrão e chaves do documento

Limites explícitos:
    - Não conhece variantes de repositório nem o modelo de configuração
    - Não realiza I/O
"""
