class QuestionBankError(Exception):
    pass
