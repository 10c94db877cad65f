"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""


# Exceção base para falhas na inicialização do servidor
class BootstrapError(Exception):
    exit_code: int = 1


# Configuração inválida (variáveis de ambiente, caminhos)
class ConfigurationError(BootstrapError):
    exit_code = 2

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# Porta não numérica ou fora do intervalo válido
class InvalidPortError(ConfigurationError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Porta inválida: '{value}' (esperado inteiro entre 0 e 65535)")


# Falha ao montar o container de dependências ou resolver o Bootstrap
class ContainerError(BootstrapError):
    exit_code = 3

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Erro no container de dependências: {reason}")


# Falha ao abrir o socket do servidor
class ServerStartError(BootstrapError):
    exit_code = 4

    def __init__(self, host: str, port: int, reason: str):
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Não foi possível iniciar o servidor em {host}:{port}: {reason}")


# Contexto ou coleção de handlers alterados depois de iniciados
class ContextStateError(BootstrapError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
