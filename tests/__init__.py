"""
Testes da bolsa de cotações.

- tests/unit/ : testes de unidade e cenários ponta a ponta em memória
"""
