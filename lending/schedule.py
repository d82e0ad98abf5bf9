from dateutil.relativedelta import relativedelta


def split_principal(amount, terms):
    """
    Split a principal into ``terms`` integer installment amounts.

    Every installment gets ``amount // terms``; the division remainder is
    added to the last one, so the amounts always sum to ``amount``.
    """
    base, remainder = divmod(amount, terms)
    amounts = [base] * terms
    amounts[-1] += remainder
    return amounts


def due_dates(processed_at, terms):
    """Monthly due dates, the first one month after ``processed_at``."""
    return [processed_at + relativedelta(months=i) for i in range(1, terms + 1)]


def build_schedule(amount, terms, processed_at):
    """Return ``(amount, due_date)`` pairs for a new loan's installments."""
    return list(zip(split_principal(amount, terms), due_dates(processed_at, terms)))
