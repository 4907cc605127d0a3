# tomanbook

tomanbook keeps a simple household ledger: money that comes in, money that
goes out, and the balance between them. Amounts are whole tomans, numbers are
shown with Persian digits, and every entry is dated by the Jalali calendar.

It has no dependencies outside the Python standard library (Python 3.10 or
later).

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The command

`tomanbook` runs one command against a ledger file and then writes the file
back. The file is `data.txt` in the current directory unless `--data PATH`
is given before the command. A missing file is treated as an empty ledger.

```
tomanbook income AMOUNT SOURCE          # add an income, dated today
tomanbook cost AMOUNT CATEGORY [-d DESCRIPTION]   # add a cost, dated today
tomanbook remove-income N               # remove the N-th income (from 1)
tomanbook remove-cost N                 # remove the N-th cost (from 1)
tomanbook list                          # show all entries and the totals
tomanbook balance                       # show total income, total cost, balance
tomanbook chart MONTH                   # costs per category in a Jalali month
```

For example:

```
tomanbook income 2500000 حقوق
tomanbook cost 120000 "خورد و خوراک" -d نان
tomanbook chart فروردین
tomanbook --data other.txt list
```

`CATEGORY` must be one of: تفریح، خورد و خوراک، رفت‌وآمد، قبوض، پزشکی، لباس،
سایر. `MONTH` must be a Persian month name (فروردین … اسفند).

An income amount must be a whole number from 1 to 1,000,000,000 (Persian or
ASCII digits). A cost amount that is not a whole number is recorded as 0.
When a command cannot be carried out (a missing amount, a bad entry number,
an income out of range), the message is printed to standard error prefixed by
`خطا:` and the exit status is 1; the ledger file is still written back.

`chart` prints one line per category: the category, a bar of `█` scaled so
that the largest total is 40 characters wide, and the total.

## The data file

The data file is UTF-8 text, one record per line:

```
INCOME:<date> - <source> - <amount> تومان 
COST:<date> -  <category> - <description> -  <amount> تومان
TOTAL_INCOME:<number>
TOTAL_COST:<number>
```

Dates are written as day, Persian month name and year, for example
`1 فروردین 1403`; amounts inside entries use Persian digits and the `٬`
thousands separator. The totals are read back as stored; they are not
recomputed from the entries.

## Using it from Python

```python
from datetime import date

from tomanbook.ledger import Ledger, LedgerError, load_ledger

ledger = Ledger()
ledger.add_income(2500000, "حقوق", date(2024, 3, 20))
ledger.add_cost(120000, "خورد و خوراک", "", date(2024, 3, 21))
print(ledger.balance)                      # 2380000
ledger.save("data.txt")

again = load_ledger("data.txt")
print(again.month_totals("فروردین"))      # {'خورد و خوراک': 120000}
```

`Ledger` holds `incomes` and `costs` (lists of entry texts), `total_income`,
`total_cost`, and the read-only `balance` (income minus cost).

- `add_income(amount, source, today=None)` and
  `add_cost(amount, category, description="", today=None)` append an entry
  and return its text; `today` defaults to the current date. A cost with an
  empty description is recorded under its category name.
- `remove_income(index)` and `remove_cost(index)` delete the entry at a
  zero-based position and return the amount taken off the total. A bad
  position raises `LedgerError`. `remove_income` reads the amount of the
  entry. `remove_cost` reads the number from the third `-`-separated field of
  the entry, which is the description, so for an ordinary cost entry nothing
  is taken off `total_cost`.
- `month_totals(month_name)` adds up the costs of each category whose date
  contains the given month name, sorted by category.
- `save(path="data.txt")` writes the file; `load_ledger(path="data.txt")`
  reads one.

### Dates and numbers

```python
from datetime import date

from tomanbook.jalali import gregorian_to_jalali, format_persian_date, current_date
from tomanbook.persian import format_number, to_english_digits

jdate = gregorian_to_jalali(date(2024, 3, 20))   # JalaliDate(year=1403, month=1, day=1)
print(format_persian_date(jdate))                 # 1 فروردین 1403
print(current_date(date(2024, 3, 20)))            # the same, straight from a Gregorian date

print(format_number(1250000))                     # ۱٬۲۵۰٬۰۰۰
print(to_english_digits("۱۲۵۰"))                 # 1250
```

## What it does not do

There is no graphical window: the ledger is used through the command above
or from Python, and the monthly chart is printed as text bars rather than
drawn.